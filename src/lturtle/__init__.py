from .errors import LTurtleError, ConfigError, UnbalancedStackError
from .agent import AgentState, OrientedAgent
from .primitives import Branch, Leaf
from .config import (
    GenerationConfig,
    PlantDefinition,
    Rules,
    load_from_toml,
    loads_toml,
)
from .interpreter import GrammarInterpreter, generate
from .presets import get_preset, preset_names

__all__ = [
    "LTurtleError",
    "ConfigError",
    "UnbalancedStackError",
    "AgentState",
    "OrientedAgent",
    "Branch",
    "Leaf",
    "GenerationConfig",
    "PlantDefinition",
    "Rules",
    "load_from_toml",
    "loads_toml",
    "GrammarInterpreter",
    "generate",
    "get_preset",
    "preset_names",
]
