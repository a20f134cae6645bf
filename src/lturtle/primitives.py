from typing import Tuple

import numpy as np
from pydantic import BaseModel, Field


class Branch(BaseModel):
    """Tapered cylinder segment emitted by the `B` command."""

    start: np.ndarray = Field(..., description="Start point of the segment")
    start_radius: float = Field(..., description="Radius at the start point")
    end: np.ndarray = Field(..., description="End point of the segment")
    end_radius: float = Field(..., description="Radius at the end point")

    class Config:
        arbitrary_types_allowed = True
        frozen = True

    @property
    def length(self) -> float:
        return float(np.linalg.norm(self.end - self.start))


class Leaf(BaseModel):
    """Leaf quad anchored at `position`, spanned by `forward` and `left`."""

    position: np.ndarray = Field(..., description="Anchor point of the leaf")
    forward: np.ndarray = Field(..., description="Direction of the leaf's length")
    left: np.ndarray = Field(..., description="Direction of the leaf's width")
    size: Tuple[float, float] = Field(..., description="Width and length of the leaf")

    class Config:
        arbitrary_types_allowed = True
        frozen = True

    @property
    def width(self) -> float:
        return self.size[0]

    @property
    def length(self) -> float:
        return self.size[1]
