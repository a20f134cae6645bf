from typing import Iterable, List, Sequence

import numpy as np
import rerun as rr

from .agent import OrientedAgent
from .primitives import Branch, Leaf

BARK_COLOR = [166, 86, 40]
LEAF_COLOR = [77, 175, 74]


def log_primitives(
    branches: Sequence[Branch], leaves: Sequence[Leaf], entity: str = "plant"
):
    """Log branches as line strips and leaves as arrows along their length."""
    rr.log(entity, rr.Clear(recursive=True))

    if branches:
        rr.log(
            f"{entity}/branches",
            rr.LineStrips3D(
                [[b.start, b.end] for b in branches],
                radii=[0.5 * (b.start_radius + b.end_radius) for b in branches],
                colors=[BARK_COLOR],
            ),
        )

    if leaves:
        rr.log(
            f"{entity}/leaves",
            rr.Arrows3D(
                origins=[leaf.position for leaf in leaves],
                vectors=[leaf.forward * leaf.length for leaf in leaves],
                radii=[0.5 * leaf.width for leaf in leaves],
                colors=[LEAF_COLOR],
            ),
        )
        rr.log(
            f"{entity}/leaf_anchors",
            rr.Points3D(
                [leaf.position for leaf in leaves],
                colors=[LEAF_COLOR],
            ),
        )


def log_agent(agent: OrientedAgent, entity: str = "agent"):
    """Log the agent's frame: forward in green, left in blue, up in red."""
    rr.log(
        entity,
        rr.Arrows3D(
            origins=[agent.position] * 3,
            vectors=np.stack([agent.forward, agent.left, agent.up]),
            colors=[[0, 255, 0], [0, 0, 255], [255, 0, 0]],
        ),
    )


def symbols_as_markdown(symbols: Iterable[str]) -> str:
    tab_size = 0
    markdown_lines: List[str] = []
    for symbol in symbols:
        if symbol == "]":
            tab_size = max(0, tab_size - 1)

        indent = "  " * tab_size
        markdown_lines.append(f"{indent}- `{symbol}`")

        if symbol == "[":
            tab_size += 1
    return "\n".join(markdown_lines)


def log_symbols(symbols: Iterable[str], entity: str = "symbols"):
    """Log an interpreted symbol stream as an indented markdown list."""
    rr.log(
        entity,
        rr.TextDocument(
            symbols_as_markdown(symbols),
            media_type=rr.MediaType.MARKDOWN,
        ),
    )
