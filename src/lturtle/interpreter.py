from collections.abc import Iterable, Mapping
from typing import Iterator, List, Optional, Tuple

import numpy as np

from .agent import OrientedAgent, normalize
from .config import GenerationConfig, Rules
from .primitives import Branch, Leaf

WORLD_UP = np.array([0.0, 1.0, 0.0])


class GrammarInterpreter:
    """Expands an L-system sentence and drives an `OrientedAgent` with it.

    Branches and leaves are appended to the lists passed in by the caller,
    in the order the symbols are interpreted (depth-first, left to right).

    `strict` configures the agent created when none is given. A passed-in
    agent keeps its own `strict`; passing a conflicting value raises.
    """

    def __init__(
        self,
        config: GenerationConfig,
        rules: Mapping[str, str],
        branches: List[Branch],
        leaves: List[Leaf],
        agent: Optional[OrientedAgent] = None,
        strict: Optional[bool] = None,
    ):
        if agent is None:
            agent = OrientedAgent(strict=bool(strict))
        elif strict is not None and strict != agent.strict:
            raise ValueError(
                f"strict={strict} conflicts with the agent's strict={agent.strict}"
            )
        self._config = config
        self._rules = dict(rules)
        self._branches = branches
        self._leaves = leaves
        self._agent = agent

    @property
    def config(self) -> GenerationConfig:
        return self._config

    @property
    def rules(self) -> Rules:
        return dict(self._rules)

    @property
    def agent(self) -> OrientedAgent:
        return self._agent

    def run(self, sentence: Iterable[str], depth: int = 0) -> None:
        """Rewrite `sentence` and interpret the result.

        Symbols with a rule are replaced and the replacement is run one level
        deeper. Symbols without a rule are interpreted right away. Once
        `depth` reaches `max_depth` every symbol is interpreted as is.
        """
        for symbol in self.expand(sentence, depth):
            self.process(symbol)

    def expand(self, sentence: Iterable[str], depth: int = 0) -> Iterator[str]:
        """Yield the symbols `run` would interpret, without moving the agent.

        Uses an explicit stack of (symbols, depth) frames, so deep grammars
        are not limited by the interpreter's recursion limit.
        """
        max_depth = self._config.max_depth
        stack: List[Tuple[Iterator[str], int]] = [(iter(sentence), depth)]

        while stack:
            symbols, level = stack[-1]
            symbol = next(symbols, None)
            if symbol is None:
                stack.pop()
                continue

            replacement = self._rules.get(symbol) if level < max_depth else None
            if replacement is None:
                yield symbol
            else:
                # Replacement sits on top, the rest of this frame waits below it
                stack.append((iter(replacement), level + 1))

    def process(self, symbol: str) -> None:
        """Execute the turtle command for a single symbol."""
        agent = self._agent
        cfg = self._config
        step = cfg.distance * agent.brush_width

        if symbol == "L" or symbol == "l":
            leaf_width = cfg.leaf_size * agent.brush_width
            self._leaves.append(
                Leaf(
                    position=agent.position,
                    forward=agent.forward,
                    left=agent.left,
                    size=(leaf_width, leaf_width * 2),
                )
            )
            agent.move(step)

        elif symbol == "B":
            radius = cfg.radius * agent.brush_width
            self._branches.append(
                Branch(
                    start=agent.position,
                    start_radius=radius,
                    end=agent.position + step * agent.forward,
                    end_radius=cfg.brush_decay_coef * radius,
                )
            )
            agent.move(step)

        elif symbol == "M":
            agent.move(step)

        elif symbol == "+":
            agent.rotate(WORLD_UP, cfg.angle_world_y)

        elif symbol == "-":
            agent.rotate(WORLD_UP, -cfg.angle_world_y)

        elif symbol == "&":
            agent.rotate(normalize(agent.left), cfg.angle_turtle_left)

        elif symbol == "^":
            agent.rotate(normalize(agent.left), -cfg.angle_turtle_left)

        elif symbol == "*":
            width = cfg.brush_decay_coef * agent.brush_width
            # Underflow to 0.0 keeps the last positive width, even in strict mode
            if width > 0.0:
                agent.set_brush_width(width)

        elif symbol == "[":
            agent.push()

        elif symbol == "]":
            agent.pop()

        # Anything else is ignored


def generate(
    axiom: str,
    rules: Mapping[str, str],
    config: GenerationConfig,
    strict: bool = False,
) -> Tuple[List[Branch], List[Leaf]]:
    """Run a fresh interpreter on `axiom` and return the emitted primitives."""
    branches: List[Branch] = []
    leaves: List[Leaf] = []
    GrammarInterpreter(config, rules, branches, leaves, strict=strict).run(axiom)
    return branches, leaves
