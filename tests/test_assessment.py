"""Tests for per-vehicle and fleet assessment."""

from dataclasses import replace

import pytest

from terramech.core.assessment import (
    MobilityAssessment,
    assess_fleet,
    assess_vehicle,
    mobility_index,
    vci1,
)
from terramech.core.tracked import tracked_mobility_index
from terramech.core.vci import tracked_vci1, wheeled_vci1
from terramech.core.vehicle import TrackedVehicle, WheeledVehicle
from terramech.core.wheeled import wheeled_mobility_index

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _sample_wheeled() -> WheeledVehicle:
    return WheeledVehicle(
        weight=36320.0,
        clearance=21.0,
        hp=350.0,
        axles=4,
        wheels=8,
        tire_width=15.0,
        tire_diameter=45.0,
        tires=8,
        hydraulic=True,
    )


def _sample_tracked() -> TrackedVehicle:
    return TrackedVehicle(
        weight=136000.0,
        clearance=19.0,
        hp=1500.0,
        length=385.0,
        track_width=25.0,
        shoe_area=190.0,
        bogies=7,
        hydraulic=True,
    )


# ---------------------------------------------------------------------------
# Single-vehicle dispatch
# ---------------------------------------------------------------------------


def test_dispatch_matches_class_pipelines() -> None:
    """mobility_index dispatches on the descriptor type."""
    w, t = _sample_wheeled(), _sample_tracked()
    assert mobility_index(w) == wheeled_mobility_index(w)
    assert mobility_index(t) == tracked_mobility_index(t)


def test_assess_wheeled_vehicle() -> None:
    """Wheeled assessment uses the wheeled VCI1 regression."""
    result = assess_vehicle(_sample_wheeled())
    assert isinstance(result, MobilityAssessment)
    assert result.vehicle_class == "wheeled"
    assert result.vci1 == wheeled_vci1(result.mobility_index)
    assert abs(result.vci1 - 26.77) < 0.1


def test_assess_tracked_vehicle() -> None:
    """Tracked assessment uses the tracked VCI1 regression."""
    result = assess_vehicle(_sample_tracked())
    assert result.vehicle_class == "tracked"
    assert result.vci1 == tracked_vci1(result.mobility_index)
    assert abs(result.vci1 - 29.8) < 0.1
    assert vci1(_sample_tracked()) == result.vci1


def test_mapping_rejected_by_dispatch() -> None:
    """A raw mapping has no class and cannot be dispatched."""
    with pytest.raises(TypeError):
        mobility_index({"weight": 36320})  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Fleet table
# ---------------------------------------------------------------------------


def test_fleet_table_columns_and_order() -> None:
    """Fleet rows are indexed by name and ordered by ascending VCI1."""
    df = assess_fleet({"Tank": _sample_tracked(), "Carrier": _sample_wheeled()})
    assert list(df.columns) == ["vehicle_class", "mobility_index", "vci1"]
    assert list(df.index) == ["Carrier", "Tank"]
    assert df.loc["Tank", "vehicle_class"] == "tracked"
    assert df["vci1"].is_monotonic_increasing


def test_empty_fleet() -> None:
    """An empty fleet yields an empty table with the same columns."""
    df = assess_fleet({})
    assert df.empty
    assert list(df.columns) == ["vehicle_class", "mobility_index", "vci1"]


# ---------------------------------------------------------------------------
# Legacy grouser pass-through
# ---------------------------------------------------------------------------


def test_legacy_grouser_forwarded() -> None:
    """legacy_grouser reaches the tracked pipeline through every entry point."""
    grousered = replace(_sample_tracked(), grouser_height=2.0)
    legacy_mi = tracked_mobility_index(grousered, legacy_grouser=True)
    assert mobility_index(grousered, legacy_grouser=True) == legacy_mi
    assert mobility_index(grousered) != legacy_mi

    result = assess_vehicle(grousered, legacy_grouser=True)
    assert result.mobility_index == legacy_mi
    assert vci1(grousered, legacy_grouser=True) == tracked_vci1(legacy_mi)

    df = assess_fleet({"Tank": grousered}, legacy_grouser=True)
    assert df.loc["Tank", "mobility_index"] == legacy_mi


def test_legacy_grouser_ignored_for_wheeled() -> None:
    """The flag does not change wheeled results."""
    w = _sample_wheeled()
    assert mobility_index(w, legacy_grouser=True) == mobility_index(w)
