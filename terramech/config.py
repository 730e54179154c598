"""Configuration loader for the terramech mobility engine."""

from pathlib import Path
from typing import Any

import yaml

from terramech.core.errors import DescriptorError
from terramech.core.vehicle import TRACKED, WHEELED, TrackedVehicle, WheeledVehicle

_VEHICLE_CLASSES: dict[str, type[WheeledVehicle] | type[TrackedVehicle]] = {
    WHEELED: WheeledVehicle,
    TRACKED: TrackedVehicle,
}


def load_vehicles(path: Path) -> dict[str, WheeledVehicle | TrackedVehicle]:
    """Load vehicle descriptors from a YAML file.

    The file holds a ``vehicles`` list.  Each entry has a ``name``, a
    ``class`` (``wheeled`` or ``tracked``) and the published attributes
    for that class::

        vehicles:
          - name: Utility truck
            class: wheeled
            weight: 36320
            tire-width: 15
            hydraulic: true
            ...

    Args:
        path: Path to the YAML file.

    Returns:
        Mapping from vehicle name to descriptor, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If an entry has no name, an unknown class or a
            duplicate name.
        MissingAttributeError: If an entry lacks a required attribute.
        InvalidValueError: If an attribute value is unusable.
    """
    if not path.exists():
        raise FileNotFoundError(f"Vehicle file not found: {path}")

    with open(path, encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if not isinstance(data, dict) or not isinstance(data.get("vehicles"), list):
        raise ValueError(f"{path} must contain a 'vehicles' list")

    entries: list[dict[str, Any]] = data["vehicles"]
    vehicles: dict[str, WheeledVehicle | TrackedVehicle] = {}

    for idx, entry in enumerate(entries):
        # --- Validate entry header ---
        if not isinstance(entry, dict):
            raise ValueError(f"Vehicle entry {idx} must be a mapping")
        name = entry.get("name")
        if name is None or name == "":
            raise ValueError(f"Vehicle entry {idx} is missing required field 'name'")
        name = str(name)
        if name in vehicles:
            raise ValueError(f"Vehicle entry {idx}: duplicate name '{name}'")

        vehicle_class = entry.get("class")
        if vehicle_class not in _VEHICLE_CLASSES:
            raise ValueError(
                f"Vehicle entry {idx} ({name}): 'class' must be one of "
                f"{sorted(_VEHICLE_CLASSES)}, got {vehicle_class!r}"
            )

        # --- Build descriptor from the remaining attributes ---
        attributes = {k: v for k, v in entry.items() if k not in ("name", "class")}
        try:
            vehicles[name] = _VEHICLE_CLASSES[vehicle_class].from_mapping(attributes)
        except DescriptorError as exc:
            exc.add_note(f"in vehicle entry {idx} ({name}) of {path}")
            raise

    return vehicles
