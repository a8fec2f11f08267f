import argparse
import sys
import tomllib
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError

from opsgenie_sync.logger import get_app_logger, get_log_status_filter
from opsgenie_sync.models import TeamRoleConfig
from opsgenie_sync.services import TeamRoleSynchronizer
from opsgenie_sync.state import StateStore

DEFAULT_ROLES_DIR = Path("team-roles")
DEFAULT_STATE_FILE = Path("opsgenie-state.json")


class SyncManager:
    def __init__(self, roles_dir: Path, state_file: Path) -> None:
        self.logger = get_app_logger()
        self.logger.info("Initializing SyncManager...\n")
        self.roles: dict[str, TeamRoleConfig] = {}
        self.load_roles(roles_dir)

        self.state = StateStore.load(state_file)
        self.synchronizer = TeamRoleSynchronizer(self.roles, self.state)

    def load_roles(self, roles_dir: Path) -> None:
        if not roles_dir.is_dir():
            self.logger.warning("Team roles directory %s does not exist", roles_dir)
            return

        for file_path in sorted(roles_dir.iterdir()):
            if file_path.suffix == ".toml":
                with file_path.open("rb") as f:
                    name = file_path.stem
                    try:
                        data: dict[str, Any] = tomllib.load(f)
                        self.roles[name] = TeamRoleConfig.model_validate(data)
                    except (tomllib.TOMLDecodeError, ValidationError):
                        self.logger.exception(
                            "Invalid team role definition %s, skipping", file_path
                        )

    def apply(self) -> None:
        self.synchronizer.sync()

    def refresh(self) -> None:
        self.synchronizer.refresh()

    def destroy(self) -> None:
        self.synchronizer.destroy()

    def import_role(self, name: str, role_id: str) -> None:
        self.synchronizer.import_role(name, role_id)


def args_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="opsgenie-sync",
        description=(
            "Sync the team roles defined in the team roles directory to Opsgenie."
        ),
    )
    parser.add_argument(
        "--roles-dir",
        type=Path,
        default=DEFAULT_ROLES_DIR,
        help=f"Directory of team role definitions (default: {DEFAULT_ROLES_DIR}).",
    )
    parser.add_argument(
        "--state-file",
        type=Path,
        default=DEFAULT_STATE_FILE,
        help=f"File tracking the created team roles (default: {DEFAULT_STATE_FILE}).",
    )

    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("apply", help="Create, update and delete team roles.")
    commands.add_parser("refresh", help="Refresh the tracked team roles.")
    commands.add_parser("destroy", help="Delete every tracked team role.")
    import_parser = commands.add_parser(
        "import", help="Track an existing team role under a defined name."
    )
    import_parser.add_argument("name", help="Name of the team role definition.")
    import_parser.add_argument("role_id", help="Opsgenie id of the team role.")
    return parser


def check_logger_status() -> None:
    """Check log filter flags and exit or warn if needed."""
    logger = get_app_logger()
    log_status_filter = get_log_status_filter()

    if log_status_filter is None:
        logger.critical("No LogStatusFilter found, cannot verify log state.")
        sys.exit(1)

    if log_status_filter.had_error:
        logger.critical("One or more errors were logged. Check logs for details.")
        sys.exit(1)

    if log_status_filter.had_warning:
        logger.warning("One or more warnings were logged. Check logs for details.")


def main(argv: list[str] | None = None) -> None:
    load_dotenv()

    # Parse the arguments
    args = args_parser().parse_args(argv)

    # Initialize the sync manager
    sync_manager = SyncManager(args.roles_dir, args.state_file)

    match args.command:
        case "apply":
            sync_manager.apply()
        case "refresh":
            sync_manager.refresh()
        case "destroy":
            sync_manager.destroy()
        case "import":
            sync_manager.import_role(args.name, args.role_id)

    # Check the logger status
    check_logger_status()
