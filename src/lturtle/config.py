import math
from pathlib import Path
from typing import Any, Dict, Literal

import toml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .errors import ConfigError

Rules = Dict[str, str]


class GenerationConfig(BaseModel):
    radius: float = Field(..., gt=0.0, description="Branch radius at brush width 1")
    distance: float = Field(
        ..., gt=0.0, description="Step length of the turtle at brush width 1"
    )
    leaf_size: float = Field(..., gt=0.0, description="Leaf width at brush width 1")
    angle_world_y: float = Field(
        ..., description="Rotation about the world up axis for '+' and '-' (radians)"
    )
    angle_turtle_left: float = Field(
        ...,
        description="Rotation about the turtle's left axis for '&' and '^' (radians)",
    )
    brush_decay_coef: float = Field(
        ...,
        gt=0.0,
        description="Multiplier applied to the brush width by '*' and to branch end radii",
    )
    max_depth: int = Field(..., ge=0, description="Maximum rule expansion depth")

    class Config:
        frozen = True
        extra = "forbid"

    @classmethod
    def from_degrees(
        cls, angle_world_y: float, angle_turtle_left: float, **kwargs: Any
    ) -> "GenerationConfig":
        return cls(
            angle_world_y=math.radians(angle_world_y),
            angle_turtle_left=math.radians(angle_turtle_left),
            **kwargs,
        )


class PlantDefinition(BaseModel):
    name: str = Field(default="plant", description="Name of the plant")
    axiom: str = Field(..., description="Initial sentence")
    rules: Rules = Field(default_factory=dict, description="Symbol -> replacement")
    config: GenerationConfig

    class Config:
        extra = "forbid"

    @field_validator("rules")
    @classmethod
    def single_symbol_keys(cls, rules: Rules) -> Rules:
        for key in rules:
            if len(key) != 1:
                raise ValueError(f"Rule key {key!r} must be a single symbol")
        return rules


def _plant_from_dict(data: Dict[str, Any]) -> PlantDefinition:
    if not isinstance(data.get("plant"), dict):
        raise ConfigError("Missing [plant] table")
    plant = dict(data["plant"])

    angle_unit: Literal["degrees", "radians"] = plant.pop("angle_unit", "degrees")
    if angle_unit not in ("degrees", "radians"):
        raise ConfigError(f"angle_unit must be 'degrees' or 'radians', got {angle_unit!r}")

    config = plant.pop("config", {})
    if not isinstance(config, dict):
        raise ConfigError("[plant.config] must be a table")
    config = dict(config)
    if angle_unit == "degrees":
        for key in ("angle_world_y", "angle_turtle_left"):
            if key not in config:
                continue
            value = config[key]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{key} must be a number of degrees, got {value!r}")
            config[key] = math.radians(value)

    try:
        return PlantDefinition(config=config, **plant)
    except ValidationError as e:
        raise ConfigError(f"Invalid plant definition:\n{e}") from e


def loads_toml(text: str) -> PlantDefinition:
    """Parse a plant definition from a TOML document.

    Expected layout::

        [plant]
        name = "bush"
        axiom = "B"
        angle_unit = "degrees"   # optional, "degrees" or "radians"

        [plant.rules]
        B = "B[+B]B"

        [plant.config]
        radius = 0.1
        ...
    """
    try:
        data = toml.loads(text)
    except toml.TomlDecodeError as e:
        raise ConfigError(f"Invalid TOML: {e}") from e
    return _plant_from_dict(data)


def load_from_toml(toml_path: str | Path) -> PlantDefinition:
    """Load a plant definition from a TOML file"""
    with open(toml_path, "r") as f:
        return loads_toml(f.read())
