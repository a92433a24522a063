# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Plain-text fleet summary over a sorted mission snapshot."""
from __future__ import annotations

from spacefleet.ports import MissionStore, RocketStore


def generate_report(rockets: RocketStore, missions: MissionStore) -> str:
    """One header line per mission, then one indented line per attached rocket.

    Missions come in ``get_all_sorted`` order; rockets are listed by name.
    """
    lines: list[str] = []
    for mission in missions.get_all_sorted():
        lines.append(
            f"{mission.name} - {mission.status.label} - {mission.all_rockets_count} dragons"
        )
        for rocket in sorted(rockets.find_by_mission(mission.name), key=lambda r: r.name):
            lines.append(f"  {rocket.name} - {rocket.status.label}")
    return "".join(f"{line}\n" for line in lines)
