# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Spacefleet

Track a fleet of reusable rockets and the missions they fly. Assigning a
rocket, changing its status and finishing a mission keep each rocket
record and its mission's aggregate counters consistent. Ships with
in-memory and JSON snapshot stores, a text report and a CLI.
"""

from spacefleet.domain.fleet import (
    RocketStatus,
    MissionStatus,
    Rocket,
    Mission,
    derive_mission_status,
)
from spacefleet.domain.errors import (
    FleetError,
    RocketNotFound,
    MissionNotFound,
    RocketAlreadyExists,
    MissionAlreadyExists,
    RocketAlreadyAssigned,
    CannotAssignToEndedMission,
    OperationNotAllowed,
)
from spacefleet.domain.management import FleetManager
from spacefleet.domain.reporting import generate_report
from spacefleet.ports import RocketStore, MissionStore
from spacefleet.adapters.memory import InMemoryRocketStore, InMemoryMissionStore
from spacefleet.version import __version__

__all__ = [
    "RocketStatus",
    "MissionStatus",
    "Rocket",
    "Mission",
    "derive_mission_status",
    "FleetError",
    "RocketNotFound",
    "MissionNotFound",
    "RocketAlreadyExists",
    "MissionAlreadyExists",
    "RocketAlreadyAssigned",
    "CannotAssignToEndedMission",
    "OperationNotAllowed",
    "FleetManager",
    "generate_report",
    "RocketStore",
    "MissionStore",
    "InMemoryRocketStore",
    "InMemoryMissionStore",
    "__version__",
]
