# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Storage ports for fleet entities.

Stores are keyed by entity name. Look-ups of absent names return None or
an empty list; they never raise.
"""
from __future__ import annotations

from abc import ABC, abstractmethod

from spacefleet.domain.fleet import Mission, Rocket


class RocketStore(ABC):
    """Keyed storage for rockets."""

    @abstractmethod
    def save(self, rocket: Rocket) -> None:
        """Insert or fully overwrite the rocket with the same name."""

    @abstractmethod
    def find_by_name(self, name: str) -> Rocket | None:
        ...

    @abstractmethod
    def find_by_mission(self, mission_name: str) -> list[Rocket]:
        """Rockets attached to the mission, in store order."""

    @abstractmethod
    def all(self) -> list[Rocket]:
        ...


class MissionStore(ABC):
    """Keyed storage for missions."""

    @abstractmethod
    def save(self, mission: Mission) -> None:
        """Insert or fully overwrite the mission with the same name."""

    @abstractmethod
    def find_by_name(self, name: str) -> Mission | None:
        ...

    @abstractmethod
    def get_all_sorted(self) -> list[Mission]:
        """Missions by descending rocket count, ties by descending name."""

    @abstractmethod
    def all(self) -> list[Mission]:
        ...
