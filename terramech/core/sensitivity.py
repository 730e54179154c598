"""Sensitivity of the Mobility Index to individual vehicle attributes.

Perturbs one numeric attribute of a frozen descriptor with
:func:`dataclasses.replace` and re-evaluates the Mobility Index.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import fields, replace

import numpy as np
from numpy.typing import NDArray

from terramech.core.assessment import Vehicle, mobility_index

_FLAG_FIELDS: frozenset[str] = frozenset({"hydraulic", "chains", "grouser_height"})


def _check_attribute(vehicle: Vehicle, attribute: str) -> None:
    names = {f.name for f in fields(vehicle)} - _FLAG_FIELDS
    if attribute not in names:
        raise ValueError(
            f"'{attribute}' is not a numeric attribute of "
            f"{type(vehicle).__name__}; expected one of {sorted(names)}"
        )


def compute_attribute_sensitivity(
    vehicle: Vehicle,
    attribute: str,
    delta: float = 1.0,
) -> float:
    """Estimate dMI/d(attribute) by central differences.

    ::

        sensitivity = (MI(x + delta) - MI(x - delta)) / (2 * delta)

    Piecewise factors may change bracket inside ``[x - delta, x + delta]``;
    the estimate then includes the jump.

    Args:
        vehicle: Descriptor to perturb.
        attribute: Name of a numeric field (e.g. ``"weight"``).
        delta: Perturbation magnitude in the attribute's unit (> 0).

    Returns:
        Central-difference derivative of MI.

    Raises:
        ValueError: If *delta* <= 0, the attribute is not numeric, or a
            perturbed value is invalid for the descriptor.
    """
    if delta <= 0.0:
        raise ValueError("delta must be > 0.")
    _check_attribute(vehicle, attribute)

    base: float = getattr(vehicle, attribute)
    mi_plus = mobility_index(replace(vehicle, **{attribute: base + delta}))
    mi_minus = mobility_index(replace(vehicle, **{attribute: base - delta}))
    return (mi_plus - mi_minus) / (2.0 * delta)


def sweep_attribute(
    vehicle: Vehicle,
    attribute: str,
    values: Iterable[float],
) -> NDArray[np.float64]:
    """Mobility Index for each value of one attribute.

    Raises:
        ValueError: If the attribute is not numeric or a value is
            invalid for the descriptor.
    """
    _check_attribute(vehicle, attribute)
    return np.array(
        [mobility_index(replace(vehicle, **{attribute: v})) for v in values],
        dtype=np.float64,
    )
