from typing import Dict, List

from .config import GenerationConfig, PlantDefinition
from .errors import ConfigError

PRESETS: Dict[str, PlantDefinition] = {
    "bush": PlantDefinition(
        name="bush",
        axiom="B",
        rules={"B": "B[*&+BL][*^-BL]*B"},
        config=GenerationConfig.from_degrees(
            angle_world_y=35.0,
            angle_turtle_left=25.0,
            radius=0.1,
            distance=1.0,
            leaf_size=0.3,
            brush_decay_coef=0.8,
            max_depth=4,
        ),
    ),
    "tree": PlantDefinition(
        name="tree",
        axiom="BBA",
        rules={"A": "*B[&+AL][&-AL][^A]L"},
        config=GenerationConfig.from_degrees(
            angle_world_y=120.0,
            angle_turtle_left=30.0,
            radius=0.15,
            distance=1.2,
            leaf_size=0.4,
            brush_decay_coef=0.75,
            max_depth=5,
        ),
    ),
    "fern": PlantDefinition(
        name="fern",
        axiom="X",
        rules={
            "X": "B[*&X]B[*-&X]*+BX",
            "B": "BB",
        },
        config=GenerationConfig.from_degrees(
            angle_world_y=25.0,
            angle_turtle_left=22.5,
            radius=0.05,
            distance=0.5,
            leaf_size=0.2,
            brush_decay_coef=0.9,
            max_depth=4,
        ),
    ),
    "sapling": PlantDefinition(
        name="sapling",
        axiom="B[&L][^L]M*B",
        rules={},
        config=GenerationConfig.from_degrees(
            angle_world_y=90.0,
            angle_turtle_left=45.0,
            radius=0.05,
            distance=0.5,
            leaf_size=0.25,
            brush_decay_coef=0.7,
            max_depth=0,
        ),
    ),
}


def preset_names() -> List[str]:
    return sorted(PRESETS)


def get_preset(name: str) -> PlantDefinition:
    try:
        return PRESETS[name].model_copy(deep=True)
    except KeyError:
        raise ConfigError(
            f"Unknown preset {name!r}, expected one of: {', '.join(preset_names())}"
        ) from None
