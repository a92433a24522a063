# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fleet management: entity creation and the rocket/mission transition engine.

Every operation reads current state from the injected stores, computes the
next rocket and mission records, and writes them back only after all
preconditions have passed. Operations are synchronous and not internally
synchronized; concurrent callers must serialize calls themselves.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from spacefleet.domain.errors import (
    CannotAssignToEndedMission,
    MissionAlreadyExists,
    MissionNotFound,
    OperationNotAllowed,
    RocketAlreadyAssigned,
    RocketAlreadyExists,
    RocketNotFound,
)
from spacefleet.domain.fleet import Mission, MissionStatus, Rocket, RocketStatus
from spacefleet.ports import MissionStore, RocketStore

logger = logging.getLogger(__name__)

_LAUNCH_ONLY_BY_ASSIGNMENT = "Rocket can be sent in space only by assigning it to mission."


@dataclass(frozen=True)
class _Move:
    """One allowed rocket status change and its effect on the owning mission."""

    target: RocketStatus
    detach: bool = False
    all_rockets: int = 0
    in_space: int = 0
    in_repair: int = 0
    requires_mission: bool = False


_ON_GROUND = RocketStatus.ON_GROUND
_IN_SPACE = RocketStatus.IN_SPACE
_IN_REPAIR = RocketStatus.IN_REPAIR

# (current, requested) -> move. Pairs with equal statuses are no-ops;
# pairs mapped to None are refused.
_TRANSITIONS: dict[tuple[RocketStatus, RocketStatus], _Move | None] = {
    (_ON_GROUND, _IN_REPAIR): _Move(_IN_REPAIR),
    (_ON_GROUND, _IN_SPACE): None,
    (_IN_SPACE, _IN_REPAIR): _Move(_IN_REPAIR, in_space=-1, in_repair=1),
    (_IN_SPACE, _ON_GROUND): _Move(_ON_GROUND, detach=True, all_rockets=-1, in_space=-1),
    (_IN_REPAIR, _IN_SPACE): _Move(_IN_SPACE, in_space=1, in_repair=-1, requires_mission=True),
    (_IN_REPAIR, _ON_GROUND): _Move(_ON_GROUND, detach=True, all_rockets=-1, in_repair=-1),
}


class FleetManager:
    """Creates rockets and missions and moves them through their states."""

    def __init__(self, rockets: RocketStore, missions: MissionStore) -> None:
        self.rockets = rockets
        self.missions = missions

    # --- creation ---

    def create_rocket(self, name: str) -> Rocket:
        if self.rockets.find_by_name(name) is not None:
            raise RocketAlreadyExists(name)
        rocket = Rocket(name=name)
        self.rockets.save(rocket)
        logger.info("Rocket created: %s", name)
        return rocket

    def create_mission(self, name: str) -> Mission:
        if self.missions.find_by_name(name) is not None:
            raise MissionAlreadyExists(name)
        mission = Mission(name=name)
        self.missions.save(mission)
        logger.info("Mission created: %s", name)
        return mission

    # --- transitions ---

    def assign(self, rocket_name: str, mission_name: str) -> tuple[Rocket, Mission]:
        """Attach an unassigned rocket to an open mission.

        An ON_GROUND rocket launches (IN_SPACE); a rocket already in repair
        stays IN_REPAIR and counts towards the mission's repair total.

        Raises:
            MissionNotFound, RocketNotFound, CannotAssignToEndedMission,
            RocketAlreadyAssigned: checked in that order, before any write.
        """
        mission = self._get_mission(mission_name)
        rocket = self._get_rocket(rocket_name)
        if mission.status is MissionStatus.ENDED:
            raise CannotAssignToEndedMission(mission_name)
        if rocket.is_assigned:
            raise RocketAlreadyAssigned(rocket_name, rocket.mission)

        status = _IN_SPACE if rocket.status is _ON_GROUND else rocket.status
        updated_rocket = rocket.with_status(status).with_mission(mission_name)
        updated_mission = mission.with_counters(
            all_rockets=1,
            in_space=1 if status is _IN_SPACE else 0,
            in_repair=1 if status is _IN_REPAIR else 0,
        )

        self.rockets.save(updated_rocket)
        self.missions.save(updated_mission)
        logger.info(
            "Rocket %s assigned to %s (%s); mission now %s %s",
            rocket_name, mission_name, status.name,
            updated_mission.status.name, updated_mission.counters,
        )
        return updated_rocket, updated_mission

    def assign_many(self, rocket_names: Iterable[str], mission_name: str) -> list[str]:
        """Assign rockets in order, skipping ones that are missing or taken.

        Mission-level failures (missing or ended mission) propagate and stop
        the batch; rockets assigned before the failure stay assigned.

        Returns:
            Names of the rockets that were assigned.
        """
        assigned: list[str] = []
        for rocket_name in rocket_names:
            try:
                self.assign(rocket_name, mission_name)
            except (RocketNotFound, RocketAlreadyAssigned) as e:
                logger.info("Skipping rocket %s for %s: %s", rocket_name, mission_name, e)
                continue
            assigned.append(rocket_name)
        return assigned

    def change_status(self, rocket_name: str, status: RocketStatus) -> Rocket:
        """Move a rocket to ``status``, keeping its mission's counters in step.

        Requesting the rocket's current status is a no-op that writes
        nothing. A rocket can only reach IN_SPACE from repair while it
        still belongs to a mission.

        Raises:
            RocketNotFound: no such rocket.
            OperationNotAllowed: the transition would launch a rocket
                outside of a mission assignment.
        """
        rocket = self._get_rocket(rocket_name)
        if rocket.status is status:
            return rocket

        move = _TRANSITIONS[(rocket.status, status)]
        if move is None or (move.requires_mission and not rocket.is_assigned):
            raise OperationNotAllowed(_LAUNCH_ONLY_BY_ASSIGNMENT)

        updated_mission = None
        if rocket.is_assigned:
            mission = self._get_mission(rocket.mission)
            updated_mission = mission.with_counters(
                all_rockets=move.all_rockets,
                in_space=move.in_space,
                in_repair=move.in_repair,
            )

        if move.detach:
            updated_rocket = rocket.grounded()
        else:
            updated_rocket = rocket.with_status(move.target)

        if updated_mission is not None:
            self.missions.save(updated_mission)
        self.rockets.save(updated_rocket)
        logger.info(
            "Rocket %s: %s -> %s%s",
            rocket_name, rocket.status.name, move.target.name,
            f" (left {rocket.mission})" if move.detach and rocket.is_assigned else "",
        )
        return updated_rocket

    def finish_mission(self, mission_name: str) -> list[str]:
        """Ground every rocket on the mission and close it as ENDED.

        Returns:
            Names of the rockets that were grounded.
        """
        mission = self._get_mission(mission_name)
        attached = self.rockets.find_by_mission(mission_name)
        for rocket in attached:
            self.rockets.save(rocket.grounded())
        self.missions.save(mission.ended())
        logger.info("Mission %s ended; %d rocket(s) grounded", mission_name, len(attached))
        return [r.name for r in attached]

    # --- lookups ---

    def _get_rocket(self, name: str) -> Rocket:
        rocket = self.rockets.find_by_name(name)
        if rocket is None:
            raise RocketNotFound(name)
        return rocket

    def _get_mission(self, name: str) -> Mission:
        mission = self.missions.find_by_name(name)
        if mission is None:
            raise MissionNotFound(name)
        return mission
