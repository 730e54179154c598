"""One-pass Vehicle Cone Index (VCI1) from the Mobility Index.

Both regressions are for fine-grained soils.  The scalar converters are
the reference; the ``*_curve`` variants evaluate the same formulas over
NumPy arrays.
"""

from __future__ import annotations

import math

import numpy as np
from numpy.typing import ArrayLike, NDArray

# Wheeled vehicles switch from the rational to the power-law regression
# at this Mobility Index (the lower formula is exclusive).
WHEELED_BRANCH_MI: float = 115.0

_TRACKED_POLE: float = -5.6
_WHEELED_POLE: float = -3.74


def _check_mobility_index(mi: float) -> None:
    if not math.isfinite(mi):
        raise ValueError(f"mobility index must be finite, got {mi!r}")


def tracked_vci1(mi: float) -> float:
    """One-pass VCI for a tracked vehicle.

    ``VCI1 = 7 + 0.2 * MI - 39.2 / (MI + 5.6)``

    Raises:
        ValueError: If *mi* is not finite or sits on the pole at -5.6.
    """
    _check_mobility_index(mi)
    if mi == _TRACKED_POLE:
        raise ValueError("tracked VCI1 is undefined at mobility index -5.6")
    return 7.0 + 0.2 * mi - 39.2 / (mi + 5.6)


def wheeled_vci1(mi: float) -> float:
    """One-pass VCI for a wheeled vehicle.

    Below an MI of 115 the rational regression applies::

        VCI1 = 11.48 + 0.2 * MI - 39.2 / (MI + 3.74)

    From 115 upward the power law ``VCI1 = 4.1 * MI ** 0.446`` is used.
    The two branches do not meet exactly at 115 and are not smoothed.

    Raises:
        ValueError: If *mi* is not finite or sits on the pole at -3.74.
    """
    _check_mobility_index(mi)
    if mi < WHEELED_BRANCH_MI:
        if mi == _WHEELED_POLE:
            raise ValueError("wheeled VCI1 is undefined at mobility index -3.74")
        return 11.48 + 0.2 * mi - 39.2 / (mi + 3.74)
    return 4.1 * mi**0.446


def _as_mobility_array(mi_values: ArrayLike) -> NDArray[np.float64]:
    mi = np.asarray(mi_values, dtype=np.float64)
    if not np.all(np.isfinite(mi)):
        raise ValueError("mobility index values must be finite.")
    return mi


def tracked_vci1_curve(mi_values: ArrayLike) -> NDArray[np.float64]:
    """Element-wise :func:`tracked_vci1` over an array of MI values.

    Raises:
        ValueError: If any value is not finite or sits on the pole.
    """
    mi = _as_mobility_array(mi_values)
    if np.any(mi == _TRACKED_POLE):
        raise ValueError("tracked VCI1 is undefined at mobility index -5.6")
    return 7.0 + 0.2 * mi - 39.2 / (mi + 5.6)


def wheeled_vci1_curve(mi_values: ArrayLike) -> NDArray[np.float64]:
    """Element-wise :func:`wheeled_vci1` over an array of MI values.

    Raises:
        ValueError: If any value is not finite or sits on the pole.
    """
    mi = _as_mobility_array(mi_values)
    lower = mi < WHEELED_BRANCH_MI
    if np.any(lower & (mi == _WHEELED_POLE)):
        raise ValueError("wheeled VCI1 is undefined at mobility index -3.74")
    # Both branches are evaluated; discard the power law's NaNs below zero.
    with np.errstate(invalid="ignore", divide="ignore"):
        rational = 11.48 + 0.2 * mi - 39.2 / (mi + 3.74)
        power = 4.1 * np.power(mi, 0.446)
    return np.where(lower, rational, power)
