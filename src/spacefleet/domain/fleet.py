# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Fleet entities: rockets, missions and their status enums.

Entities are immutable values. State changes produce updated copies via
the ``with_*`` helpers; the rocket-to-mission link is a mission name,
never an object reference.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum


class _NamedStatus(Enum):
    """Enum parsed from case-insensitive member names."""

    @classmethod
    def parse(cls, value: str):
        if not isinstance(value, str):
            raise ValueError(f"{cls.__name__} must be given as a name, got {value!r}")
        key = value.strip().upper().replace("-", "_").replace(" ", "_")
        try:
            return cls[key]
        except KeyError as exc:
            choices = ", ".join(m.name for m in cls)
            raise ValueError(
                f"Unknown {cls.__name__} '{value}' (expected one of: {choices})"
            ) from exc

    @property
    def label(self) -> str:
        return self.value


class RocketStatus(_NamedStatus):
    ON_GROUND = "On Ground"
    IN_SPACE = "In Space"
    IN_REPAIR = "In Repair"


class MissionStatus(_NamedStatus):
    SCHEDULED = "SCHEDULED"
    IN_PROGRESS = "IN_PROGRESS"
    PENDING = "PENDING"
    ENDED = "ENDED"


@dataclass(frozen=True)
class Rocket:
    """A reusable vehicle and the mission it is attached to, if any."""

    name: str
    status: RocketStatus = RocketStatus.ON_GROUND
    mission: str | None = None

    def __post_init__(self) -> None:
        if self.status is RocketStatus.ON_GROUND and self.mission is not None:
            raise ValueError(
                f"Rocket '{self.name}' is on ground but attached to mission '{self.mission}'"
            )

    @property
    def is_assigned(self) -> bool:
        return self.mission is not None

    def with_status(self, status: RocketStatus) -> Rocket:
        return replace(self, status=status)

    def with_mission(self, mission: str | None) -> Rocket:
        return replace(self, mission=mission)

    def grounded(self) -> Rocket:
        """Copy that is back on the ground and detached from its mission."""
        return replace(self, status=RocketStatus.ON_GROUND, mission=None)


@dataclass(frozen=True)
class Mission:
    """A campaign aggregating counts of its attached rockets by sub-state.

    ``status`` is persisted for query convenience but is derived from the
    counters; use :meth:`with_counters` rather than setting it directly.
    """

    name: str
    status: MissionStatus = MissionStatus.SCHEDULED
    all_rockets_count: int = 0
    in_space_count: int = 0
    in_repair_count: int = 0

    def __post_init__(self) -> None:
        counts = (self.all_rockets_count, self.in_space_count, self.in_repair_count)
        if any(c < 0 for c in counts):
            raise ValueError(f"Mission '{self.name}' counters must be non-negative: {counts}")
        if self.in_space_count + self.in_repair_count > self.all_rockets_count:
            raise ValueError(
                f"Mission '{self.name}' has more rockets in space/repair "
                f"than assigned: {counts}"
            )

    @property
    def counters(self) -> tuple[int, int, int]:
        return (self.all_rockets_count, self.in_space_count, self.in_repair_count)

    def with_counters(
        self,
        all_rockets: int = 0,
        in_space: int = 0,
        in_repair: int = 0,
    ) -> Mission:
        """Copy with counter deltas applied and status recomputed."""
        all_rockets_count = self.all_rockets_count + all_rockets
        in_space_count = self.in_space_count + in_space
        in_repair_count = self.in_repair_count + in_repair
        return replace(
            self,
            status=derive_mission_status(all_rockets_count, in_repair_count),
            all_rockets_count=all_rockets_count,
            in_space_count=in_space_count,
            in_repair_count=in_repair_count,
        )

    def ended(self) -> Mission:
        """Copy closed for good: zero counters, status forced to ENDED."""
        return replace(
            self,
            status=MissionStatus.ENDED,
            all_rockets_count=0,
            in_space_count=0,
            in_repair_count=0,
        )


def derive_mission_status(all_rockets_count: int, in_repair_count: int) -> MissionStatus:
    """Mission status as a function of its counters. Never yields ENDED."""
    if all_rockets_count == 0:
        return MissionStatus.SCHEDULED
    if in_repair_count > 0:
        return MissionStatus.PENDING
    return MissionStatus.IN_PROGRESS
