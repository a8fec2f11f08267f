from collections.abc import Callable
from http import HTTPStatus
from typing import Any

import requests

from opsgenie_sync.clients import OpsgenieClient
from opsgenie_sync.logger import get_app_logger
from opsgenie_sync.models import Right, TeamRoleConfig, TeamRoleState, rights_key


def map_rights(rights: list[Right]) -> list[dict[str, Any]]:
    """Convert rights into the shape the Opsgenie API expects."""
    return [{"right": r.right, "granted": r.granted} for r in rights]


class TeamRoleResource:
    """Create, read, update and delete a single Opsgenie team role."""

    def __init__(self, client: OpsgenieClient) -> None:
        self.client = client
        self.logger = get_app_logger()

    def create(
        self,
        config: TeamRoleConfig,
        on_created: Callable[[TeamRoleState], None] | None = None,
    ) -> TeamRoleState:
        """
        Create the role, then read it back.

        `on_created` receives the new role before the read-back, so the role
        can be tracked even when reading it fails.
        """
        self.logger.info("Creating Opsgenie team role '%s'", config.role_name)
        result = self.client.create_role(
            config.team_id, config.role_name, map_rights(config.rights)
        )

        state = TeamRoleState(
            id=result["id"],
            team_id=config.team_id,
            role_name=config.role_name,
            rights=config.rights,
        )
        if on_created is not None:
            on_created(state)
        return self.fetch(state)

    def fetch(self, state: TeamRoleState) -> TeamRoleState:
        """Read the role from Opsgenie, letting every error through."""
        team_role = self.client.get_role(
            state.team_id, role_id=state.id, role_name=state.role_name
        )
        return state.model_copy(
            update={
                "id": team_role.get("id") or state.id,
                "role_name": team_role["name"],
                "rights": [
                    Right.model_validate(r) for r in team_role.get("rights") or []
                ],
            }
        )

    def read(self, state: TeamRoleState) -> TeamRoleState | None:
        """
        Read the role from Opsgenie.

        Returns None when the role no longer exists, so it can be dropped from
        the tracked state. Any other error is raised unchanged.
        """
        try:
            return self.fetch(state)
        except requests.HTTPError as e:
            if e.response is None or e.response.status_code != HTTPStatus.NOT_FOUND:
                raise
            self.logger.warning(
                "Opsgenie team role %s (%s) not found, removing it from state",
                state.role_name,
                state.id,
            )
            return None

    def update(self, state: TeamRoleState, config: TeamRoleConfig) -> TeamRoleState:
        self.client.update_role(
            config.team_id, state.id, config.role_name, map_rights(config.rights)
        )
        return TeamRoleState(
            id=state.id,
            team_id=config.team_id,
            role_name=config.role_name,
            rights=config.rights,
        )

    def delete(self, state: TeamRoleState) -> None:
        self.client.delete_role(state.team_id, state.id)

    def import_(self, team_id: str, role_id: str) -> TeamRoleState | None:
        """Adopt an existing role, the identifier is taken as the role id."""
        return self.read(TeamRoleState(id=role_id, team_id=team_id, role_name=""))

    @staticmethod
    def requires_replacement(state: TeamRoleState, config: TeamRoleConfig) -> bool:
        return state.role_name != config.role_name

    @staticmethod
    def needs_update(state: TeamRoleState, config: TeamRoleConfig) -> bool:
        return state.team_id != config.team_id or rights_key(
            state.rights
        ) != rights_key(config.rights)
