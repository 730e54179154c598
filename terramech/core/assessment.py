"""Per-vehicle and fleet mobility assessment.

Dispatches a descriptor to the wheeled or tracked pipeline by its type
and collects MI and VCI1 into a single result.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

import pandas as pd

from terramech.core.tracked import tracked_mobility_index
from terramech.core.vci import tracked_vci1, wheeled_vci1
from terramech.core.vehicle import TRACKED, WHEELED, TrackedVehicle, WheeledVehicle
from terramech.core.wheeled import wheeled_mobility_index

Vehicle = WheeledVehicle | TrackedVehicle


@dataclass(frozen=True)
class MobilityAssessment:
    """Mobility figures for one vehicle.

    Attributes:
        vehicle_class: ``"wheeled"`` or ``"tracked"``.
        mobility_index: Dimensionless Mobility Index.
        vci1: One-pass Vehicle Cone Index.
    """

    vehicle_class: str
    mobility_index: float
    vci1: float


def _check_vehicle(vehicle: object) -> None:
    if not isinstance(vehicle, (WheeledVehicle, TrackedVehicle)):
        raise TypeError(
            f"Expected WheeledVehicle or TrackedVehicle, got {type(vehicle).__name__}"
        )


def mobility_index(vehicle: Vehicle, legacy_grouser: bool = False) -> float:
    """Mobility Index of either vehicle class.

    ``legacy_grouser`` is forwarded to :func:`tracked_mobility_index` and
    has no effect on wheeled vehicles.
    """
    _check_vehicle(vehicle)
    if isinstance(vehicle, WheeledVehicle):
        return wheeled_mobility_index(vehicle)
    return tracked_mobility_index(vehicle, legacy_grouser=legacy_grouser)


def vci1(vehicle: Vehicle, legacy_grouser: bool = False) -> float:
    """One-pass VCI of either vehicle class."""
    return assess_vehicle(vehicle, legacy_grouser=legacy_grouser).vci1


def assess_vehicle(
    vehicle: Vehicle, legacy_grouser: bool = False
) -> MobilityAssessment:
    """Compute MI and VCI1 for a single vehicle.

    Args:
        vehicle: Wheeled or tracked descriptor.
        legacy_grouser: Forwarded to :func:`tracked_mobility_index`.

    Raises:
        TypeError: If *vehicle* is not a vehicle descriptor.  Raw
            mappings are rejected because their class is ambiguous.
    """
    mi = mobility_index(vehicle, legacy_grouser=legacy_grouser)
    if isinstance(vehicle, WheeledVehicle):
        return MobilityAssessment(WHEELED, mi, wheeled_vci1(mi))
    return MobilityAssessment(TRACKED, mi, tracked_vci1(mi))


def assess_fleet(
    vehicles: Mapping[str, Vehicle], legacy_grouser: bool = False
) -> pd.DataFrame:
    """Tabulate MI and VCI1 for a named set of vehicles.

    Args:
        vehicles: Mapping from vehicle name to descriptor.
        legacy_grouser: Forwarded to :func:`tracked_mobility_index` for
            tracked vehicles.

    Returns:
        DataFrame indexed by ``name`` with columns ``vehicle_class``,
        ``mobility_index`` and ``vci1``, sorted by ascending ``vci1``
        (the vehicle needing the weakest soil first).
    """
    rows: list[dict[str, object]] = []
    for name, vehicle in vehicles.items():
        result = assess_vehicle(vehicle, legacy_grouser=legacy_grouser)
        rows.append(
            {
                "name": name,
                "vehicle_class": result.vehicle_class,
                "mobility_index": result.mobility_index,
                "vci1": result.vci1,
            }
        )

    columns = ["name", "vehicle_class", "mobility_index", "vci1"]
    df = pd.DataFrame(rows, columns=columns)
    return df.sort_values("vci1", kind="stable").set_index("name")
