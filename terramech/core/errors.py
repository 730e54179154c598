"""Descriptor validation errors for the terramech mobility engine."""

from __future__ import annotations


class DescriptorError(ValueError):
    """Base class for malformed vehicle descriptors."""


class MissingAttributeError(DescriptorError):
    """A required attribute is absent from a vehicle descriptor.

    Attributes:
        attribute: Published attribute name (e.g. ``"tire-width"``).
        vehicle_class: ``"wheeled"`` or ``"tracked"``.
    """

    def __init__(self, attribute: str, vehicle_class: str):
        self.attribute: str = attribute
        self.vehicle_class: str = vehicle_class
        super().__init__(
            f"{vehicle_class} vehicle is missing required attribute '{attribute}'"
        )


class InvalidValueError(DescriptorError):
    """An attribute holds a value the formulas cannot use.

    Raised for zero or negative divisors, non-positive weight, negative
    clearance or horsepower, and non-numeric values.

    Attributes:
        attribute: Attribute name.
        value: The rejected value.
    """

    def __init__(self, attribute: str, value: object, reason: str):
        self.attribute: str = attribute
        self.value: object = value
        super().__init__(f"{attribute} {reason}, got {value!r}")
