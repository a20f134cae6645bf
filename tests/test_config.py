import math

import pytest
from pydantic import ValidationError

from lturtle import ConfigError, GenerationConfig, PlantDefinition, load_from_toml, loads_toml

PLANT_TOML = """
[plant]
name = "shrub"
axiom = "BA"

[plant.rules]
A = "*B[&A]"

[plant.config]
radius = 0.1
distance = 1.0
leaf_size = 0.3
angle_world_y = 90.0
angle_turtle_left = 45.0
brush_decay_coef = 0.8
max_depth = 3
"""


def base_values(**overrides):
    values = dict(
        radius=0.1,
        distance=1.0,
        leaf_size=0.3,
        angle_world_y=0.5,
        angle_turtle_left=0.5,
        brush_decay_coef=0.8,
        max_depth=3,
    )
    values.update(overrides)
    return values


def test_config_is_frozen():
    config = GenerationConfig(**base_values())
    with pytest.raises(ValidationError):
        config.radius = 2.0


@pytest.mark.parametrize(
    "field", ["radius", "distance", "leaf_size", "brush_decay_coef"]
)
def test_config_rejects_non_positive_constants(field):
    with pytest.raises(ValidationError):
        GenerationConfig(**base_values(**{field: 0.0}))


def test_config_rejects_negative_depth():
    with pytest.raises(ValidationError):
        GenerationConfig(**base_values(max_depth=-1))


def test_config_requires_every_constant():
    values = base_values()
    del values["leaf_size"]
    with pytest.raises(ValidationError):
        GenerationConfig(**values)


def test_from_degrees():
    values = base_values()
    del values["angle_world_y"]
    del values["angle_turtle_left"]
    config = GenerationConfig.from_degrees(90.0, 45.0, **values)
    assert config.angle_world_y == pytest.approx(math.pi / 2)
    assert config.angle_turtle_left == pytest.approx(math.pi / 4)


def test_plant_rejects_multi_symbol_rule_keys():
    with pytest.raises(ValidationError):
        PlantDefinition(axiom="A", rules={"AB": "B"}, config=base_values())


def test_loads_toml():
    plant = loads_toml(PLANT_TOML)
    assert plant.name == "shrub"
    assert plant.axiom == "BA"
    assert plant.rules == {"A": "*B[&A]"}
    assert plant.config.max_depth == 3
    assert plant.config.angle_world_y == pytest.approx(math.pi / 2)
    assert plant.config.angle_turtle_left == pytest.approx(math.pi / 4)


def test_loads_toml_in_radians():
    text = PLANT_TOML.replace('axiom = "BA"', 'axiom = "BA"\nangle_unit = "radians"')
    plant = loads_toml(text)
    assert plant.config.angle_world_y == pytest.approx(90.0)


def test_load_from_toml_file(tmp_path):
    path = tmp_path / "shrub.toml"
    path.write_text(PLANT_TOML)
    plant = load_from_toml(path)
    assert plant.rules["A"] == "*B[&A]"


@pytest.mark.parametrize(
    "text",
    [
        "this is = not toml [",
        '[other]\nvalue = 1\n',
        PLANT_TOML.replace("max_depth = 3", "max_depth = -3"),
        PLANT_TOML.replace('A = "*B[&A]"', 'AB = "*B[&A]"'),
        PLANT_TOML.replace('axiom = "BA"', 'axiom = "BA"\nangle_unit = "turns"'),
    ],
)
def test_loads_toml_errors(text):
    with pytest.raises(ConfigError):
        loads_toml(text)


def test_config_error_is_a_value_error():
    with pytest.raises(ValueError):
        loads_toml("[plant]\n")


def test_loads_toml_rejects_unknown_plant_key():
    text = PLANT_TOML.replace('axiom = "BA"', 'axiom = "BA"\nangles_in_degrees = false')
    with pytest.raises(ConfigError, match="angles_in_degrees"):
        loads_toml(text)


def test_loads_toml_rejects_unknown_config_key():
    text = PLANT_TOML.replace("max_depth = 3", "max_depth = 3\nmax_dept = 4")
    with pytest.raises(ConfigError, match="max_dept"):
        loads_toml(text)


def test_loads_toml_rejects_non_table_config():
    text = '[plant]\naxiom = "B"\nconfig = "x"\n'
    with pytest.raises(ConfigError, match="must be a table"):
        loads_toml(text)


@pytest.mark.parametrize("value", ['"90"', "true"])
def test_loads_toml_rejects_non_numeric_degrees(value):
    text = PLANT_TOML.replace("angle_world_y = 90.0", f"angle_world_y = {value}")
    with pytest.raises(ConfigError, match="angle_world_y"):
        loads_toml(text)


def test_generation_config_rejects_unknown_field():
    with pytest.raises(ValidationError):
        GenerationConfig(**base_values(decay=0.5))
