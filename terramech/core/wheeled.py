"""Wheeled vehicle Mobility Index (FM 5-430-00-1, Kennedy & Rush 1968).

The Mobility Index combines eight dimensionless factors::

    MI = ((contact_pressure * weight) / (tire * grouser)
          + wheel_load - clearance) * engine * transmission

Clearance, engine and transmission factors are shared with tracked
vehicles and live in :mod:`terramech.core.factors`.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from terramech.core.factors import (
    check_plausible_mobility_index,
    clearance_factor,
    engine_factor,
    lookup_bracket,
    transmission_factor,
)
from terramech.core.vehicle import WHEELED, WheeledVehicle, coerce_wheeled

logger = logging.getLogger(__name__)

# (lbs per axle upper bound, (slope, intercept)) -----------------------------

WEIGHT_FACTOR_BRACKETS: tuple[tuple[float, tuple[float, float]], ...] = (
    (2000.0, (0.533, 0.0)),
    (13500.0, (0.033, 1.05)),
    (20000.0, (0.142, -0.42)),
)
WEIGHT_FACTOR_DEFAULT: tuple[float, float] = (0.278, -3.115)

CHAINS_GROUSER_FACTOR: float = 1.05


def contact_pressure_factor(vehicle: WheeledVehicle) -> float:
    """Weight over tire width times tire count times tire radius."""
    return vehicle.weight / (
        vehicle.tire_width * vehicle.tires * vehicle.tire_diameter / 2.0
    )


def weight_factor(vehicle: WheeledVehicle) -> float:
    """Piecewise-linear weight factor selected by load per axle.

    The ``(slope, intercept)`` pair is chosen from
    :data:`WEIGHT_FACTOR_BRACKETS` by pounds per axle and applied to
    kips per axle.
    """
    lbs_per_axle = vehicle.weight / vehicle.axles
    kips = vehicle.weight / 1000.0
    slope, intercept = lookup_bracket(
        lbs_per_axle, WEIGHT_FACTOR_BRACKETS, WEIGHT_FACTOR_DEFAULT
    )
    return slope * (kips / vehicle.axles) + intercept


def tire_factor(vehicle: WheeledVehicle) -> float:
    """Tire factor: ``(10 + tire_width) / 100``."""
    return (10.0 + vehicle.tire_width) / 100.0


def grouser_factor(vehicle: WheeledVehicle) -> float:
    """1.05 with tire chains fitted, otherwise 1.0."""
    return CHAINS_GROUSER_FACTOR if vehicle.chains else 1.0


def wheel_load_factor(vehicle: WheeledVehicle) -> float:
    """Wheel load factor: kips per wheel."""
    return (vehicle.weight / 1000.0) / vehicle.wheels


def wheeled_mobility_index(vehicle: WheeledVehicle | Mapping[str, Any]) -> float:
    """Compute the Mobility Index of a wheeled vehicle.

    Args:
        vehicle: A :class:`WheeledVehicle` or a mapping keyed by the
            published attribute names.  Mappings are validated before
            any factor is computed.

    Returns:
        The dimensionless Mobility Index.

    Raises:
        MissingAttributeError: If a mapping lacks a required attribute.
        InvalidValueError: If an attribute value is unusable.
    """
    v = coerce_wheeled(vehicle)

    cp = contact_pressure_factor(v)
    wf = weight_factor(v)
    tf = tire_factor(v)
    gf = grouser_factor(v)
    wlf = wheel_load_factor(v)
    cf = clearance_factor(v)
    ef = engine_factor(v)
    trf = transmission_factor(v)
    logger.debug(
        "wheeled factors: contact_pressure=%.4f weight=%.4f tire=%.4f "
        "grouser=%.2f wheel_load=%.4f clearance=%.2f engine=%.2f "
        "transmission=%.2f",
        cp,
        wf,
        tf,
        gf,
        wlf,
        cf,
        ef,
        trf,
    )

    mi = ((cp * wf) / (tf * gf) + wlf - cf) * ef * trf
    check_plausible_mobility_index(mi, WHEELED)
    return mi
