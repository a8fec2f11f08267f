from typing_extensions import override

from opsgenie_sync.clients import OpsgenieClient, get_opsgenie_client
from opsgenie_sync.logger import log_operation, log_role_sync, print_section
from opsgenie_sync.models import TeamRoleConfig, TeamRoleState
from opsgenie_sync.resources import TeamRoleResource
from opsgenie_sync.state import StateStore

from .abstract_synchronizer import AbstractSynchronizer


class TeamRoleSynchronizer(AbstractSynchronizer):
    def __init__(
        self,
        roles: dict[str, TeamRoleConfig],
        state: StateStore,
        client: OpsgenieClient | None = None,
    ) -> None:
        super().__init__(roles, state)
        self.resource = TeamRoleResource(
            client if client is not None else get_opsgenie_client()
        )

    @override
    def sync(self) -> None:
        print_section("Applying Opsgenie team roles")
        for name in sorted(self.roles):
            self.sync_role(name, self.roles[name])
            self.state.save()

        # Roles that are tracked but no longer defined get deleted
        for name in self.state.names():
            if name not in self.roles:
                self.delete_role(name)
                self.state.save()

    @log_role_sync()
    def sync_role(self, name: str, config: TeamRoleConfig) -> None:
        state = self.state.get(name)
        if state is not None:
            if not self.refresh_role(name, state):
                return
            state = self.state.get(name)

        if state is None:
            self.create_role(name, config)
            return

        if self.resource.requires_replacement(state, config):
            self.logger.debug(
                "Role name of %s changed from %s to %s, replacing...\n",
                name,
                state.role_name,
                config.role_name,
            )
            if self.delete_role(name):
                self.create_role(name, config)
            return

        if not self.resource.needs_update(state, config):
            self.logger.debug("Team role %s is up to date, skipping...\n", name)
            return

        with log_operation(f"update Opsgenie team role {config.role_name}"):
            self.state.put(name, self.resource.update(state, config))

    def refresh_role(self, name: str, state: TeamRoleState) -> bool:
        """Refresh the tracked state of a role, dropping it if it is gone."""
        with log_operation(f"refresh Opsgenie team role {state.role_name}") as op:
            refreshed = self.resource.read(state)
            if refreshed is None:
                self.state.remove(name)
            else:
                self.state.put(name, refreshed)
        return op.succeeded

    def create_role(self, name: str, config: TeamRoleConfig) -> bool:
        with log_operation(f"create Opsgenie team role {config.role_name}") as op:
            # Tracked before the read-back
            state = self.resource.create(
                config, on_created=lambda created: self.state.put(name, created)
            )
            self.state.put(name, state)
        return op.succeeded

    def delete_role(self, name: str) -> bool:
        state = self.state.get(name)
        if state is None:
            return True

        with log_operation(f"delete Opsgenie team role {state.role_name}") as op:
            self.resource.delete(state)
            self.state.remove(name)
        return op.succeeded

    def refresh(self) -> None:
        print_section("Refreshing Opsgenie team roles")
        for name in self.state.names():
            state = self.state.get(name)
            if state is not None:
                self.refresh_role(name, state)
                self.state.save()

    def destroy(self) -> None:
        print_section("Destroying Opsgenie team roles")
        for name in self.state.names():
            self.delete_role(name)
            self.state.save()

    def import_role(self, name: str, role_id: str) -> bool:
        config = self.roles.get(name)
        if config is None:
            self.logger.error("No definition found for team role %s", name)
            return False

        if self.state.get(name) is not None:
            self.logger.error("Team role %s is already tracked", name)
            return False

        state: TeamRoleState | None = None
        with log_operation(f"import Opsgenie team role {role_id} as {name}") as op:
            state = self.resource.import_(config.team_id, role_id)
        if not op.succeeded:
            return False

        if state is None:
            self.logger.error("Opsgenie team role %s does not exist", role_id)
            return False

        self.state.put(name, state)
        self.state.save()
        return True
