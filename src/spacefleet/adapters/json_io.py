# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
JSON fleet snapshot I/O adapter.

Reads and writes the full rocket and mission state as one JSON document,
so the in-memory stores can survive between CLI invocations.
"""
import json
import os
from typing import Any

from spacefleet.adapters.memory import InMemoryMissionStore, InMemoryRocketStore
from spacefleet.domain.fleet import Mission, MissionStatus, Rocket, RocketStatus
from spacefleet.ports import MissionStore, RocketStore

SCHEMA_VERSION = "spacefleet_v1"


class SnapshotError(ValueError):
    """Raised when a fleet snapshot file is malformed."""


class JsonFleetReader:
    """Loads fleet snapshots into in-memory stores."""

    def read_fleet(self, path: str) -> tuple[InMemoryRocketStore, InMemoryMissionStore]:
        """Read a snapshot; a missing file yields empty stores."""
        rockets = InMemoryRocketStore()
        missions = InMemoryMissionStore()
        if not os.path.exists(path):
            return rockets, missions

        try:
            with open(path, encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise SnapshotError(f"Invalid fleet snapshot {path}: {e}") from e

        if not isinstance(data, dict) or data.get('schema_version') != SCHEMA_VERSION:
            raise SnapshotError(
                f"Unsupported fleet snapshot {path}: expected schema_version '{SCHEMA_VERSION}'"
            )

        for record in _records(data, 'missions', path):
            missions.save(self._mission_from_record(record))
        for record in _records(data, 'rockets', path):
            rockets.save(self._rocket_from_record(record))
        return rockets, missions

    def _mission_from_record(self, record: dict[str, Any]) -> Mission:
        try:
            return Mission(
                name=_name(record, 'name'),
                status=MissionStatus.parse(record['status']),
                all_rockets_count=_count(record, 'all_rockets_count'),
                in_space_count=_count(record, 'in_space_count'),
                in_repair_count=_count(record, 'in_repair_count'),
            )
        except (KeyError, ValueError) as e:
            raise SnapshotError(f"Invalid mission record {record!r}: {e}") from e

    def _rocket_from_record(self, record: dict[str, Any]) -> Rocket:
        try:
            mission = record.get('mission')
            if mission is not None:
                mission = _name(record, 'mission')
            return Rocket(
                name=_name(record, 'name'),
                status=RocketStatus.parse(record['status']),
                mission=mission,
            )
        except (KeyError, ValueError) as e:
            raise SnapshotError(f"Invalid rocket record {record!r}: {e}") from e


def _records(data: dict[str, Any], key: str, path: str) -> list[dict[str, Any]]:
    records = data.get(key, [])
    if not isinstance(records, list) or not all(isinstance(r, dict) for r in records):
        raise SnapshotError(f"Invalid fleet snapshot {path}: '{key}' must be a list of objects")
    return records


def _name(record: dict[str, Any], key: str) -> str:
    value = record[key]
    if not isinstance(value, str):
        raise ValueError(f"'{key}' must be a string, got {value!r}")
    return value


def _count(record: dict[str, Any], key: str) -> int:
    value = record[key]
    # bool is an int subclass; true/false are not counts.
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValueError(f"'{key}' must be an integer, got {value!r}")
    return value


class JsonFleetWriter:
    """Writes fleet snapshots to JSON files."""

    def write_fleet(self, rockets: RocketStore, missions: MissionStore, path: str) -> None:
        body = {
            'schema_version': SCHEMA_VERSION,
            'missions': [
                {
                    'name': m.name,
                    'status': m.status.name,
                    'all_rockets_count': m.all_rockets_count,
                    'in_space_count': m.in_space_count,
                    'in_repair_count': m.in_repair_count,
                }
                for m in missions.all()
            ],
            'rockets': [
                {'name': r.name, 'status': r.status.name, 'mission': r.mission}
                for r in rockets.all()
            ],
        }
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(body, f, indent=2, ensure_ascii=False)
