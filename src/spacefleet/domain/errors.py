# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""Domain errors raised by fleet operations."""
from __future__ import annotations


class FleetError(Exception):
    """Base class for rule violations in the fleet domain."""


class RocketNotFound(FleetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rocket with name '{name}' does not exist.")


class MissionNotFound(FleetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Mission with name '{name}' does not exist.")


class RocketAlreadyExists(FleetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Rocket with name '{name}' already exists.")


class MissionAlreadyExists(FleetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Mission with name '{name}' already exists.")


class RocketAlreadyAssigned(FleetError):
    def __init__(self, name: str, mission: str | None = None) -> None:
        self.name = name
        self.mission = mission
        super().__init__(f"Rocket with name '{name}' already assigned to mission.")


class CannotAssignToEndedMission(FleetError):
    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Mission with name '{name}' already ended. Cannot assign to ended mission."
        )


class OperationNotAllowed(FleetError):
    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"This operation is not allowed. {reason}")
