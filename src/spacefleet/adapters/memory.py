# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
In-memory store adapters.

Map-backed reference implementation of the storage ports. Entities live
for the lifetime of the process; dict insertion order is the store order.
"""
from __future__ import annotations

from spacefleet.domain.fleet import Mission, Rocket
from spacefleet.ports import MissionStore, RocketStore


class InMemoryRocketStore(RocketStore):
    """Rockets keyed by name in a plain dict."""

    def __init__(self) -> None:
        self._store: dict[str, Rocket] = {}

    def save(self, rocket: Rocket) -> None:
        self._store[rocket.name] = rocket

    def find_by_name(self, name: str) -> Rocket | None:
        return self._store.get(name)

    def find_by_mission(self, mission_name: str) -> list[Rocket]:
        return [r for r in self._store.values() if r.mission == mission_name]

    def all(self) -> list[Rocket]:
        return list(self._store.values())

    def __len__(self) -> int:
        return len(self._store)


class InMemoryMissionStore(MissionStore):
    """Missions keyed by name in a plain dict."""

    def __init__(self) -> None:
        self._store: dict[str, Mission] = {}

    def save(self, mission: Mission) -> None:
        self._store[mission.name] = mission

    def find_by_name(self, name: str) -> Mission | None:
        return self._store.get(name)

    def get_all_sorted(self) -> list[Mission]:
        # Two stable passes: secondary key first, then primary.
        by_name = sorted(self._store.values(), key=lambda m: m.name, reverse=True)
        return sorted(by_name, key=lambda m: m.all_rockets_count, reverse=True)

    def all(self) -> list[Mission]:
        return list(self._store.values())

    def __len__(self) -> int:
        return len(self._store)
