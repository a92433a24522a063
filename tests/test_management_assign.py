# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Tests for rocket/mission creation and assignment.

Covers single assignment preconditions, counter updates and the batch
policy of skipping per-rocket failures while aborting on mission ones.
"""
import pytest

from spacefleet.adapters.memory import InMemoryMissionStore, InMemoryRocketStore
from spacefleet.domain.errors import (
    CannotAssignToEndedMission,
    FleetError,
    MissionAlreadyExists,
    MissionNotFound,
    RocketAlreadyAssigned,
    RocketAlreadyExists,
    RocketNotFound,
)
from spacefleet.domain.fleet import Mission, MissionStatus, Rocket, RocketStatus
from spacefleet.domain.management import FleetManager


@pytest.fixture
def manager():
    return FleetManager(InMemoryRocketStore(), InMemoryMissionStore())


def _snapshot(manager):
    return manager.rockets.all(), manager.missions.all()


class TestCreation:

    def test_create_rocket(self, manager):
        rocket = manager.create_rocket("Red Dragon")
        assert rocket == Rocket("Red Dragon", RocketStatus.ON_GROUND, None)
        assert manager.rockets.find_by_name("Red Dragon") == rocket

    def test_create_mission(self, manager):
        mission = manager.create_mission("Mars")
        assert mission.status is MissionStatus.SCHEDULED
        assert mission.counters == (0, 0, 0)
        assert manager.missions.find_by_name("Mars") == mission

    def test_duplicate_rocket(self, manager):
        manager.create_rocket("Red Dragon")
        with pytest.raises(RocketAlreadyExists, match="'Red Dragon' already exists"):
            manager.create_rocket("Red Dragon")

    def test_duplicate_mission(self, manager):
        manager.create_mission("Mars")
        with pytest.raises(MissionAlreadyExists):
            manager.create_mission("Mars")

    def test_errors_share_base_class(self):
        assert issubclass(RocketAlreadyExists, FleetError)
        assert issubclass(CannotAssignToEndedMission, FleetError)


class TestAssign:

    def test_on_ground_rocket_launches(self, manager):
        manager.create_mission("Mars")
        manager.create_rocket("Red Dragon")

        manager.assign("Red Dragon", "Mars")

        rocket = manager.rockets.find_by_name("Red Dragon")
        mission = manager.missions.find_by_name("Mars")
        assert rocket.status is RocketStatus.IN_SPACE
        assert rocket.mission == "Mars"
        assert mission.status is MissionStatus.IN_PROGRESS
        assert mission.counters == (1, 1, 0)

    def test_rocket_in_repair_stays_in_repair(self, manager):
        manager.create_mission("M")
        manager.create_rocket("X")
        manager.change_status("X", RocketStatus.IN_REPAIR)

        manager.assign("X", "M")

        rocket = manager.rockets.find_by_name("X")
        mission = manager.missions.find_by_name("M")
        assert rocket == Rocket("X", RocketStatus.IN_REPAIR, "M")
        assert mission.status is MissionStatus.PENDING
        assert mission.counters == (1, 0, 1)

    def test_on_ground_rocket_to_pending_mission_keeps_pending(self, manager):
        manager.create_mission("Mars")
        manager.create_rocket("Red Dragon")
        manager.create_rocket("Dragon XL")
        manager.assign("Dragon XL", "Mars")
        manager.change_status("Dragon XL", RocketStatus.IN_REPAIR)

        manager.assign("Red Dragon", "Mars")

        mission = manager.missions.find_by_name("Mars")
        assert mission.status is MissionStatus.PENDING
        assert mission.counters == (2, 1, 1)

    def test_missing_mission_checked_first(self, manager):
        with pytest.raises(MissionNotFound):
            manager.assign("Ghost", "Nowhere")

    def test_missing_rocket(self, manager):
        manager.create_mission("Mars")
        with pytest.raises(RocketNotFound, match="'Ghost' does not exist"):
            manager.assign("Ghost", "Mars")
        assert manager.missions.find_by_name("Mars").counters == (0, 0, 0)

    def test_ended_mission_rejected_without_writes(self, manager):
        manager.create_mission("Mars")
        manager.create_rocket("Red Dragon")
        manager.finish_mission("Mars")
        before = _snapshot(manager)

        with pytest.raises(CannotAssignToEndedMission):
            manager.assign("Red Dragon", "Mars")

        assert _snapshot(manager) == before

    def test_already_assigned_elsewhere(self, manager):
        manager.create_mission("Mars")
        manager.create_mission("Moon")
        manager.create_rocket("Red Dragon")
        manager.assign("Red Dragon", "Mars")
        before = _snapshot(manager)

        with pytest.raises(RocketAlreadyAssigned) as excinfo:
            manager.assign("Red Dragon", "Moon")

        assert excinfo.value.mission == "Mars"
        assert _snapshot(manager) == before

    def test_already_assigned_same_mission(self, manager):
        manager.create_mission("Mars")
        manager.create_rocket("Red Dragon")
        manager.assign("Red Dragon", "Mars")
        with pytest.raises(RocketAlreadyAssigned):
            manager.assign("Red Dragon", "Mars")
        assert manager.missions.find_by_name("Mars").counters == (1, 1, 0)


class TestAssignMany:

    def test_skips_missing_and_taken_rockets(self, manager):
        manager.create_mission("Mars")
        manager.create_mission("Moon")
        for name in ("Dragon 1", "Dragon 2", "Dragon 3"):
            manager.create_rocket(name)
        manager.assign("Dragon 3", "Moon")

        assigned = manager.assign_many(["Dragon 1", "Ghost", "Dragon 3", "Dragon 2"], "Mars")

        assert assigned == ["Dragon 1", "Dragon 2"]
        assert manager.rockets.find_by_name("Dragon 3").mission == "Moon"
        assert manager.rockets.find_by_name("Ghost") is None
        mars = manager.missions.find_by_name("Mars")
        assert mars.counters == (2, 2, 0)
        assert mars.status is MissionStatus.IN_PROGRESS
        assert manager.missions.find_by_name("Moon").counters == (1, 1, 0)

    def test_missing_mission_propagates(self, manager):
        manager.create_rocket("Dragon 1")
        with pytest.raises(MissionNotFound):
            manager.assign_many(["Dragon 1"], "Nowhere")
        assert manager.rockets.find_by_name("Dragon 1").mission is None

    def test_ended_mission_aborts_batch(self, manager):
        manager.create_mission("Mars")
        manager.create_rocket("Dragon 1")
        manager.finish_mission("Mars")
        with pytest.raises(CannotAssignToEndedMission):
            manager.assign_many(["Ghost", "Dragon 1"], "Mars")
        assert manager.rockets.find_by_name("Dragon 1") == Rocket("Dragon 1")

    def test_empty_batch(self, manager):
        manager.create_mission("Mars")
        assert manager.assign_many([], "Mars") == []
        assert manager.missions.find_by_name("Mars") == Mission("Mars")
