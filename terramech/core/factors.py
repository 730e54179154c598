"""Factors shared by the wheeled and tracked mobility index formulas."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TypeVar

from terramech.core.vehicle import TrackedVehicle, WheeledVehicle

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Physically plausible Mobility Index range.  Values outside it are
# logged, not rejected.
PLAUSIBLE_MI_RANGE: tuple[float, float] = (0.0, 250.0)

# Power-to-weight ratio (hp per short ton) above which the engine factor
# applies.
ENGINE_HP_PER_TON_THRESHOLD: float = 10.0


def lookup_bracket(value: float, brackets: Sequence[tuple[float, T]], default: T) -> T:
    """Return the payload of the first bracket whose bound exceeds *value*.

    Brackets are checked in order with a strict ``<`` test, so a value
    equal to a bound falls into the next bracket.

    Args:
        value: Quantity being classified.
        brackets: Ordered ``(upper_bound, payload)`` pairs.
        default: Payload when *value* is at or above every bound.

    Returns:
        The selected payload.
    """
    for upper_bound, payload in brackets:
        if value < upper_bound:
            return payload
    return default


def clearance_factor(vehicle: WheeledVehicle | TrackedVehicle) -> float:
    """Clearance factor: ground clearance in inches divided by 10."""
    return vehicle.clearance / 10.0


def transmission_factor(vehicle: WheeledVehicle | TrackedVehicle) -> float:
    """Transmission factor: 1.0 with hydraulic drive, 1.05 for manual."""
    return 1.0 if vehicle.hydraulic else 1.05


def engine_factor(vehicle: WheeledVehicle | TrackedVehicle) -> float:
    """Engine factor from the power-to-weight ratio.

    ``hp_per_ton = hp / (weight / 2000)``; the factor is 1.0 up to and
    including 10 hp/ton, 1.05 above.
    """
    hp_per_ton = vehicle.hp / (vehicle.weight / 2000.0)
    return 1.0 if hp_per_ton <= ENGINE_HP_PER_TON_THRESHOLD else 1.05


def check_plausible_mobility_index(mi: float, vehicle_class: str) -> None:
    """Log a warning when *mi* is outside :data:`PLAUSIBLE_MI_RANGE`."""
    low, high = PLAUSIBLE_MI_RANGE
    if not low <= mi <= high:
        logger.warning(
            "%s mobility index %.2f is outside the plausible range [%.0f, %.0f]",
            vehicle_class,
            mi,
            low,
            high,
        )
