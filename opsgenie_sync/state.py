from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from opsgenie_sync.models import TeamRoleState


class StateFile(BaseModel):
    version: Literal[1] = 1
    roles: dict[str, TeamRoleState] = Field(default_factory=dict)


class StateStore:
    """JSON file tracking the team roles created in Opsgenie, by resource name."""

    def __init__(self, path: Path, data: StateFile | None = None) -> None:
        self.path = path
        self.data = data if data is not None else StateFile()

    @classmethod
    def load(cls, path: Path) -> "StateStore":
        if not path.exists():
            return cls(path)
        return cls(path, StateFile.model_validate_json(path.read_text()))

    def save(self) -> None:
        # Write to a sibling file first so a crash never leaves half a state file
        tmp_path = self.path.with_name(f"{self.path.name}.tmp")
        tmp_path.write_text(self.data.model_dump_json(indent=2) + "\n")
        tmp_path.replace(self.path)

    def names(self) -> list[str]:
        return sorted(self.data.roles)

    def get(self, name: str) -> TeamRoleState | None:
        return self.data.roles.get(name)

    def put(self, name: str, state: TeamRoleState) -> None:
        self.data.roles[name] = state

    def remove(self, name: str) -> None:
        self.data.roles.pop(name, None)
