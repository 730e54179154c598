"""Vehicle descriptors for the terramech mobility engine.

Wheeled and tracked vehicles are two distinct input shapes.  Each can be
built directly or from an attribute-keyed mapping that uses the published
attribute names (``"tire-width"``, ``"wheel#"``, ``"grouser-ht"``, ...).

Units are fixed: pounds, inches, square inches and horsepower.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

import numpy as np

from terramech.core.errors import InvalidValueError, MissingAttributeError

WHEELED: str = "wheeled"
TRACKED: str = "tracked"

# (published attribute name, dataclass field) -------------------------------

_WHEELED_KEYS: tuple[tuple[str, str], ...] = (
    ("weight", "weight"),
    ("clearance", "clearance"),
    ("hp", "hp"),
    ("axles", "axles"),
    ("wheel#", "wheels"),
    ("tire-width", "tire_width"),
    ("tire-diameter", "tire_diameter"),
    ("tire#", "tires"),
)

_TRACKED_KEYS: tuple[tuple[str, str], ...] = (
    ("weight", "weight"),
    ("clearance", "clearance"),
    ("hp", "hp"),
    ("length", "length"),
    ("track-width", "track_width"),
    ("shoe-area", "shoe_area"),
    ("bogie#", "bogies"),
)


def _check_number(name: str, value: Any) -> None:
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise InvalidValueError(name, value, "must be numeric")
    if not math.isfinite(value):
        raise InvalidValueError(name, value, "must be finite")


def _check_positive(name: str, value: Any) -> None:
    _check_number(name, value)
    if value <= 0:
        raise InvalidValueError(name, value, "must be > 0")


def _check_non_negative(name: str, value: Any) -> None:
    _check_number(name, value)
    if value < 0:
        raise InvalidValueError(name, value, "must be >= 0")


def _required_fields(
    attributes: Mapping[str, Any],
    keys: tuple[tuple[str, str], ...],
    vehicle_class: str,
) -> dict[str, Any]:
    fields: dict[str, Any] = {}
    for key, field_name in keys:
        if key not in attributes:
            raise MissingAttributeError(key, vehicle_class)
        fields[field_name] = attributes[key]
    return fields


def _grouser_height(attributes: Mapping[str, Any]) -> float | None:
    if "grouser-ht" not in attributes:
        return None
    height = attributes["grouser-ht"]
    if height is None:
        raise InvalidValueError("grouser-ht", height, "must be a number when present")
    return height


@dataclass(frozen=True)
class WheeledVehicle:
    """Physical description of a wheeled vehicle.

    Attributes:
        weight: Gross vehicle weight in pounds (> 0).
        clearance: Minimum ground clearance in inches (>= 0).
        hp: Net engine power in horsepower (>= 0).
        axles: Number of axles (> 0).
        wheels: Number of wheels (> 0).
        tire_width: Tire section width in inches (> 0).
        tire_diameter: Outside tire diameter in inches (> 0).
        tires: Number of tires (> 0).
        hydraulic: Hydraulic drive (automatic or hydrokinetic
            transmission) fitted.
        chains: Tire chains fitted.

    ``hydraulic`` and ``chains`` stand for present/absent attributes:
    ``True`` means the attribute is present, ``False`` (the default)
    that it is absent.  There is no meaningful "present but false".
    """

    weight: float
    clearance: float
    hp: float
    axles: int
    wheels: int
    tire_width: float
    tire_diameter: float
    tires: int
    hydraulic: bool = False
    chains: bool = False

    def __post_init__(self) -> None:
        """Validate wheeled vehicle parameters."""
        _check_positive("weight", self.weight)
        _check_non_negative("clearance", self.clearance)
        _check_non_negative("hp", self.hp)
        _check_positive("axles", self.axles)
        _check_positive("wheels", self.wheels)
        _check_positive("tire_width", self.tire_width)
        _check_positive("tire_diameter", self.tire_diameter)
        _check_positive("tires", self.tires)

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> WheeledVehicle:
        """Build a wheeled vehicle from published attribute names.

        ``hydraulic`` and ``chains`` are presence flags: the key being
        present sets the flag, whatever value it maps to.

        Raises:
            MissingAttributeError: If a required attribute is absent.
            InvalidValueError: If an attribute value is unusable.
        """
        fields = _required_fields(attributes, _WHEELED_KEYS, WHEELED)
        return cls(
            **fields,
            hydraulic="hydraulic" in attributes,
            chains="chains" in attributes,
        )


@dataclass(frozen=True)
class TrackedVehicle:
    """Physical description of a tracked vehicle.

    Attributes:
        weight: Gross vehicle weight in pounds (> 0).
        clearance: Minimum ground clearance in inches (>= 0).
        hp: Net engine power in horsepower (>= 0).
        length: Track length in contact with the ground, in inches (> 0).
        track_width: Width of one track in inches (> 0).
        shoe_area: Area of one track shoe in square inches (> 0).
        bogies: Total number of road wheels (bogies) on the ground (> 0).
        hydraulic: Hydraulic drive fitted.
        grouser_height: Grouser height in inches, or ``None`` when the
            track carries no grousers.

    ``hydraulic`` is a present/absent attribute stored as a ``bool``;
    ``grouser_height`` is absent when ``None``.
    """

    weight: float
    clearance: float
    hp: float
    length: float
    track_width: float
    shoe_area: float
    bogies: int
    hydraulic: bool = False
    grouser_height: float | None = None

    def __post_init__(self) -> None:
        """Validate tracked vehicle parameters."""
        _check_positive("weight", self.weight)
        _check_non_negative("clearance", self.clearance)
        _check_non_negative("hp", self.hp)
        _check_positive("length", self.length)
        _check_positive("track_width", self.track_width)
        _check_positive("shoe_area", self.shoe_area)
        _check_positive("bogies", self.bogies)
        if self.grouser_height is not None:
            _check_non_negative("grouser_height", self.grouser_height)

    @classmethod
    def from_mapping(cls, attributes: Mapping[str, Any]) -> TrackedVehicle:
        """Build a tracked vehicle from published attribute names.

        ``hydraulic`` is a presence flag.  ``grouser-ht`` is optional and
        supplies the grouser height when present.

        Raises:
            MissingAttributeError: If a required attribute is absent.
            InvalidValueError: If an attribute value is unusable.
        """
        fields = _required_fields(attributes, _TRACKED_KEYS, TRACKED)
        return cls(
            **fields,
            hydraulic="hydraulic" in attributes,
            grouser_height=_grouser_height(attributes),
        )


def coerce_wheeled(vehicle: WheeledVehicle | Mapping[str, Any]) -> WheeledVehicle:
    """Return *vehicle* as a :class:`WheeledVehicle`, validating mappings."""
    if isinstance(vehicle, WheeledVehicle):
        return vehicle
    if isinstance(vehicle, Mapping):
        return WheeledVehicle.from_mapping(vehicle)
    raise TypeError(
        f"Expected WheeledVehicle or mapping, got {type(vehicle).__name__}"
    )


def coerce_tracked(vehicle: TrackedVehicle | Mapping[str, Any]) -> TrackedVehicle:
    """Return *vehicle* as a :class:`TrackedVehicle`, validating mappings."""
    if isinstance(vehicle, TrackedVehicle):
        return vehicle
    if isinstance(vehicle, Mapping):
        return TrackedVehicle.from_mapping(vehicle)
    raise TypeError(
        f"Expected TrackedVehicle or mapping, got {type(vehicle).__name__}"
    )
