"""Core computation modules for the terramech mobility engine."""

from terramech.core.assessment import (
    MobilityAssessment,
    assess_fleet,
    assess_vehicle,
    mobility_index,
    vci1,
)
from terramech.core.errors import (
    DescriptorError,
    InvalidValueError,
    MissingAttributeError,
)
from terramech.core.factors import (
    PLAUSIBLE_MI_RANGE,
    clearance_factor,
    engine_factor,
    lookup_bracket,
    transmission_factor,
)
from terramech.core.sensitivity import compute_attribute_sensitivity, sweep_attribute
from terramech.core.tracked import tracked_mobility_index
from terramech.core.vci import (
    tracked_vci1,
    tracked_vci1_curve,
    wheeled_vci1,
    wheeled_vci1_curve,
)
from terramech.core.vehicle import (
    TRACKED,
    WHEELED,
    TrackedVehicle,
    WheeledVehicle,
    coerce_tracked,
    coerce_wheeled,
)
from terramech.core.wheeled import wheeled_mobility_index

__all__ = [
    "DescriptorError",
    "InvalidValueError",
    "MissingAttributeError",
    "MobilityAssessment",
    "PLAUSIBLE_MI_RANGE",
    "TRACKED",
    "TrackedVehicle",
    "WHEELED",
    "WheeledVehicle",
    "assess_fleet",
    "assess_vehicle",
    "clearance_factor",
    "coerce_tracked",
    "coerce_wheeled",
    "compute_attribute_sensitivity",
    "engine_factor",
    "lookup_bracket",
    "mobility_index",
    "sweep_attribute",
    "tracked_mobility_index",
    "tracked_vci1",
    "tracked_vci1_curve",
    "transmission_factor",
    "vci1",
    "wheeled_mobility_index",
    "wheeled_vci1",
    "wheeled_vci1_curve",
]
