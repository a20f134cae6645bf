from typing import List

import numpy as np
from pydantic import BaseModel, Field
from scipy.spatial.transform import Rotation

from .errors import UnbalancedStackError


class AgentState(BaseModel):
    position: np.ndarray = Field(
        default_factory=lambda: np.zeros(3), description="Position of the turtle"
    )
    forward: np.ndarray = Field(
        default_factory=lambda: np.array([0.0, 1.0, 0.0]),
        description="Heading of the turtle (unit vector)",
    )
    left: np.ndarray = Field(
        default_factory=lambda: np.array([0.0, 0.0, 1.0]),
        description="Left direction of the turtle (unit vector)",
    )
    up: np.ndarray = Field(
        default_factory=lambda: np.array([1.0, 0.0, 0.0]),
        description="Up direction of the turtle, forward x left (unit vector)",
    )
    brush_width: float = Field(
        default=1.0, description="Multiplier for distances, radii and leaf sizes"
    )

    class Config:
        arbitrary_types_allowed = True


def normalize(v: np.ndarray) -> np.ndarray:
    return v / np.linalg.norm(v)


class OrientedAgent:
    """3D turtle with an orthonormal frame and a brush width.

    The frame starts at the origin heading along +Y with left along +Z and
    up along +X. ``push``/``pop`` save and restore the whole state.

    In the default lenient mode ``pop`` on an empty stack and non-positive
    brush widths are ignored. With ``strict=True`` both raise instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict
        self._state = AgentState()
        self._stack: List[AgentState] = []

    @property
    def position(self) -> np.ndarray:
        return self._state.position.copy()

    @property
    def forward(self) -> np.ndarray:
        return self._state.forward.copy()

    @property
    def left(self) -> np.ndarray:
        return self._state.left.copy()

    @property
    def up(self) -> np.ndarray:
        return self._state.up.copy()

    @property
    def brush_width(self) -> float:
        return self._state.brush_width

    @property
    def state(self) -> AgentState:
        """Snapshot of the current state."""
        return self._state.model_copy(deep=True)

    @property
    def stack_depth(self) -> int:
        return len(self._stack)

    def move(self, distance: float) -> None:
        """Move along the heading by `distance` (negative moves backwards)."""
        self._state.position = self._state.position + distance * normalize(
            self._state.forward
        )

    def rotate(self, unit_axis: np.ndarray, angle_radians: float) -> None:
        """Rotate the frame about `unit_axis` by `angle_radians`.

        Only forward and left are rotated. Up is rebuilt from them and left is
        rebuilt again from up and forward, so the frame stays orthonormal no
        matter how many rotations are composed.
        """
        rotation = Rotation.from_rotvec(
            np.asarray(unit_axis, dtype=np.float64) * angle_radians
        )

        new_forward = rotation.apply(self._state.forward)
        new_left = rotation.apply(self._state.left)

        new_up = np.cross(new_forward, new_left)
        new_left = np.cross(new_up, new_forward)

        self._state.forward = normalize(new_forward)
        self._state.left = normalize(new_left)
        self._state.up = normalize(new_up)

    def set_brush_width(self, width: float) -> None:
        if width > 0.0:
            self._state.brush_width = width
        elif self.strict:
            raise ValueError(f"Brush width must be positive, got {width}")

    def push(self) -> None:
        self._stack.append(self._state.model_copy(deep=True))

    def pop(self) -> None:
        if self._stack:
            self._state = self._stack.pop()
        elif self.strict:
            raise UnbalancedStackError("Pop called on an empty turtle stack.")

    def __str__(self) -> str:
        return (
            f"OrientedAgent(position={self._state.position}, "
            f"forward={self._state.forward}, width={self._state.brush_width:.3f})"
        )
