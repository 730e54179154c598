"""Tracked vehicle Mobility Index (FM 5-430-00-1, Kennedy & Rush 1968).

::

    MI = ((contact_pressure * weight) / (track * grouser)
          + bogie - clearance) * engine * transmission
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
from terramech.core.vehicle import TRACKED, TrackedVehicle, coerce_tracked

logger = logging.getLogger(__name__)

# (gross weight upper bound in lbs, factor) ----------------------------------

WEIGHT_FACTOR_BRACKETS: tuple[tuple[float, float], ...] = (
    (50000.0, 1.0),
    (70000.0, 1.2),
    (100000.0, 1.4),
)
WEIGHT_FACTOR_DEFAULT: float = 1.8

GROUSER_HEIGHT_THRESHOLD: float = 1.5
TALL_GROUSER_FACTOR: float = 1.1


def contact_pressure_factor(vehicle: TrackedVehicle) -> float:
    """Weight over track length times track width."""
    return vehicle.weight / (vehicle.length * vehicle.track_width)


def weight_factor(vehicle: TrackedVehicle) -> float:
    """Step weight factor selected by gross weight."""
    return lookup_bracket(
        vehicle.weight, WEIGHT_FACTOR_BRACKETS, WEIGHT_FACTOR_DEFAULT
    )


def track_factor(vehicle: TrackedVehicle) -> float:
    """Track factor: track width divided by 100."""
    return vehicle.track_width / 100.0


def grouser_factor(vehicle: TrackedVehicle, legacy: bool = False) -> float:
    """Grouser factor: 1.1 for grousers taller than 1.5 in, else 1.0.

    Args:
        vehicle: The vehicle being evaluated.
        legacy: Reproduce the historical tables, where the grouser
            height was never read from the vehicle and the factor was
            always 1.0.

    Returns:
        The grouser factor.
    """
    if legacy or vehicle.grouser_height is None:
        return 1.0
    if vehicle.grouser_height > GROUSER_HEIGHT_THRESHOLD:
        return TALL_GROUSER_FACTOR
    return 1.0


def bogie_factor(vehicle: TrackedVehicle) -> float:
    """Bogie factor: tenths of weight over bogie count times shoe area."""
    return (vehicle.weight / 10.0) / (vehicle.bogies * vehicle.shoe_area)


def tracked_mobility_index(
    vehicle: TrackedVehicle | Mapping[str, Any],
    legacy_grouser: bool = False,
) -> float:
    """Compute the Mobility Index of a tracked vehicle.

    Args:
        vehicle: A :class:`TrackedVehicle` or a mapping keyed by the
            published attribute names.  Mappings are validated before
            any factor is computed.
        legacy_grouser: Passed to :func:`grouser_factor` as ``legacy``.

    Returns:
        The dimensionless Mobility Index.

    Raises:
        MissingAttributeError: If a mapping lacks a required attribute.
        InvalidValueError: If an attribute value is unusable.
    """
    v = coerce_tracked(vehicle)

    cp = contact_pressure_factor(v)
    wf = weight_factor(v)
    tkf = track_factor(v)
    gf = grouser_factor(v, legacy=legacy_grouser)
    bf = bogie_factor(v)
    cf = clearance_factor(v)
    ef = engine_factor(v)
    trf = transmission_factor(v)
    logger.debug(
        "tracked factors: contact_pressure=%.4f weight=%.2f track=%.2f "
        "grouser=%.2f bogie=%.4f clearance=%.2f engine=%.2f transmission=%.2f",
        cp,
        wf,
        tkf,
        gf,
        bf,
        cf,
        ef,
        trf,
    )

    mi = ((cp * wf) / (tkf * gf) + bf - cf) * ef * trf
    check_plausible_mobility_index(mi, TRACKED)
    return mi
