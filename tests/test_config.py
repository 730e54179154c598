"""Tests for loading vehicle descriptors from YAML."""

from pathlib import Path

import pytest

from terramech.config import load_vehicles
from terramech.core.errors import InvalidValueError, MissingAttributeError
from terramech.core.vehicle import TrackedVehicle, WheeledVehicle

_FLEET_YAML = """\
vehicles:
  - name: Carrier
    class: wheeled
    weight: 36320
    clearance: 21
    axles: 4
    wheel#: 8
    tire-width: 15
    hydraulic: true
    tire-diameter: 45
    tire#: 8
    hp: 350
  - name: Tank
    class: tracked
    weight: 136000
    clearance: 19
    length: 385
    track-width: 25
    shoe-area: 190
    hydraulic: true
    bogie#: 7
    hp: 1500
    grouser-ht: 1.75
"""


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "vehicles.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_loads_both_classes(tmp_path: Path) -> None:
    """Entries become descriptors of the declared class, in file order."""
    vehicles = load_vehicles(_write(tmp_path, _FLEET_YAML))
    assert list(vehicles) == ["Carrier", "Tank"]
    assert isinstance(vehicles["Carrier"], WheeledVehicle)
    assert isinstance(vehicles["Tank"], TrackedVehicle)
    assert vehicles["Carrier"].hydraulic is True
    assert vehicles["Tank"].grouser_height == 1.75


def test_missing_file_raises(tmp_path: Path) -> None:
    """A missing file raises FileNotFoundError."""
    with pytest.raises(FileNotFoundError):
        load_vehicles(tmp_path / "absent.yaml")


def test_requires_vehicles_list(tmp_path: Path) -> None:
    """The top level must hold a 'vehicles' list."""
    with pytest.raises(ValueError, match="'vehicles' list"):
        load_vehicles(_write(tmp_path, "trucks: []\n"))


def test_unknown_class_raises(tmp_path: Path) -> None:
    """Only wheeled and tracked classes are accepted."""
    text = "vehicles:\n  - name: Boat\n    class: hovercraft\n    weight: 1000\n"
    with pytest.raises(ValueError, match="'class' must be one of"):
        load_vehicles(_write(tmp_path, text))


def test_missing_name_raises(tmp_path: Path) -> None:
    """Every entry needs a name."""
    text = "vehicles:\n  - class: wheeled\n    weight: 1000\n"
    with pytest.raises(ValueError, match="'name'"):
        load_vehicles(_write(tmp_path, text))


def test_duplicate_name_raises(tmp_path: Path) -> None:
    """Vehicle names must be unique."""
    text = _FLEET_YAML + _FLEET_YAML.split("\n", 1)[1]
    with pytest.raises(ValueError, match="duplicate name 'Carrier'"):
        load_vehicles(_write(tmp_path, text))


def test_missing_attribute_names_entry(tmp_path: Path) -> None:
    """Attribute errors propagate with the offending entry noted."""
    text = _FLEET_YAML.replace("    tire-width: 15\n", "")
    with pytest.raises(MissingAttributeError) as info:
        load_vehicles(_write(tmp_path, text))
    assert info.value.attribute == "tire-width"
    assert any("Carrier" in note for note in info.value.__notes__)


def test_invalid_value_propagates(tmp_path: Path) -> None:
    """A zero bogie count in the file is rejected."""
    text = _FLEET_YAML.replace("bogie#: 7", "bogie#: 0")
    with pytest.raises(InvalidValueError, match="bogies"):
        load_vehicles(_write(tmp_path, text))


def test_numeric_name_zero_is_valid(tmp_path: Path) -> None:
    """A YAML name of 0 is a name, not a missing one."""
    text = _FLEET_YAML.replace("name: Carrier", "name: 0")
    vehicles = load_vehicles(_write(tmp_path, text))
    assert list(vehicles) == ["0", "Tank"]


def test_empty_name_raises(tmp_path: Path) -> None:
    """An empty name string counts as missing."""
    text = _FLEET_YAML.replace("name: Carrier", 'name: ""')
    with pytest.raises(ValueError, match="'name'"):
        load_vehicles(_write(tmp_path, text))
