# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Command-line interface for rocket fleet and mission management.

Usage:
    spacefleet rocket create "Red Dragon"
    spacefleet mission create Mars
    spacefleet assign Mars "Red Dragon" "Dragon XL"
    spacefleet status "Red Dragon" in_repair
    spacefleet finish Mars
    spacefleet report
    spacefleet --state fleet.json report
    spacefleet --version

State is kept in a JSON snapshot (--state, else $SPACEFLEET_STATE, else
./spacefleet.json) that is rewritten after each successful command.
"""
import argparse
import logging
import os
import sys

from spacefleet.adapters.json_io import JsonFleetReader, JsonFleetWriter, SnapshotError
from spacefleet.domain.errors import FleetError
from spacefleet.domain.fleet import RocketStatus
from spacefleet.domain.management import FleetManager
from spacefleet.domain.reporting import generate_report

STATE_ENV_VAR = "SPACEFLEET_STATE"
DEFAULT_STATE_PATH = "spacefleet.json"

logger = logging.getLogger(__name__)


def default_state_path() -> str:
    return os.environ.get(STATE_ENV_VAR) or DEFAULT_STATE_PATH


def _configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _run_command(args) -> None:
    """Load the snapshot, apply one command, and persist on success."""
    reader = JsonFleetReader()
    rockets, missions = reader.read_fleet(args.state)
    logger.debug(
        "Loaded %d rocket(s) and %d mission(s) from %s",
        len(rockets), len(missions), args.state,
    )
    manager = FleetManager(rockets, missions)

    if args.command == "report":
        print(generate_report(rockets, missions), end="")
        return

    if args.command == "rocket":
        rocket = manager.create_rocket(args.name)
        print(f"Created rocket {rocket.name} ({rocket.status.label})")
    elif args.command == "mission":
        mission = manager.create_mission(args.name)
        print(f"Created mission {mission.name} ({mission.status.label})")
    elif args.command == "assign":
        if len(args.rockets) == 1:
            manager.assign(args.rockets[0], args.mission)
            assigned = list(args.rockets)
        else:
            assigned = manager.assign_many(args.rockets, args.mission)
        pending = list(assigned)
        skipped = []
        for name in args.rockets:
            if name in pending:
                pending.remove(name)
            else:
                skipped.append(name)
        print(f"Assigned {len(assigned)} rocket(s) to {args.mission}")
        for name in skipped:
            print(f"  skipped {name}")
    elif args.command == "status":
        rocket = manager.change_status(args.rocket, RocketStatus.parse(args.status))
        print(f"{rocket.name} - {rocket.status.label}")
    elif args.command == "finish":
        grounded = manager.finish_mission(args.mission)
        print(f"Mission {args.mission} ended; {len(grounded)} rocket(s) grounded")

    JsonFleetWriter().write_fleet(rockets, missions, args.state)


def _get_version() -> str:
    """Get package version string."""
    from spacefleet.version import __version__
    return __version__


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spacefleet",
        description="Rocket fleet and mission management",
    )
    parser.add_argument(
        '--version', action='version',
        version=f"spacefleet {_get_version()}",
    )
    parser.add_argument(
        '--state', default=default_state_path(),
        help=f"Fleet snapshot JSON (default: ${STATE_ENV_VAR} or {DEFAULT_STATE_PATH})"
    )
    parser.add_argument(
        '--verbose', '-v', action='count', default=0,
        help="Log transitions to stderr (-vv for debug output)"
    )

    subparsers = parser.add_subparsers(dest="command")

    # --- rocket / mission ---
    rocket_parser = subparsers.add_parser("rocket", help="Manage rockets")
    rocket_sub = rocket_parser.add_subparsers(dest="action", required=True)
    rocket_create = rocket_sub.add_parser("create", help="Register a new rocket (on ground)")
    rocket_create.add_argument("name", help="Rocket name")

    mission_parser = subparsers.add_parser("mission", help="Manage missions")
    mission_sub = mission_parser.add_subparsers(dest="action", required=True)
    mission_create = mission_sub.add_parser("create", help="Schedule a new mission")
    mission_create.add_argument("name", help="Mission name")

    # --- transitions ---
    assign_parser = subparsers.add_parser(
        "assign",
        help="Assign one or more rockets to a mission",
    )
    assign_parser.add_argument("mission", help="Mission name")
    assign_parser.add_argument(
        "rockets", nargs="+",
        help="Rocket name(s); with several, missing or taken rockets are skipped"
    )

    status_parser = subparsers.add_parser("status", help="Change a rocket's status")
    status_parser.add_argument("rocket", help="Rocket name")
    status_parser.add_argument(
        "status", choices=[s.name.lower() for s in RocketStatus],
        help="Requested status"
    )

    finish_parser = subparsers.add_parser(
        "finish",
        help="End a mission and ground all of its rockets",
    )
    finish_parser.add_argument("mission", help="Mission name")

    subparsers.add_parser("report", help="Print missions and their rockets")

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    _configure_logging(args.verbose)

    try:
        _run_command(args)
    except FileNotFoundError as e:
        print(
            f"Error: State file location not found: {args.state}\n"
            f"  {e}",
            file=sys.stderr,
        )
        sys.exit(1)
    except (FleetError, SnapshotError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
