from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator

from .rights import validate_right


class Right(BaseModel):
    model_config = ConfigDict(frozen=True)

    right: str
    granted: StrictBool


def rights_key(rights: list[Right]) -> frozenset[tuple[str, bool]]:
    """Order-insensitive view of a list of rights, used to detect drift."""
    return frozenset((r.right, r.granted) for r in rights)


class TeamRoleConfig(BaseModel):
    """A declarative team role block, as written in a team-roles/*.toml file."""

    model_config = ConfigDict(populate_by_name=True)

    team_id: str = Field(alias="team-id", min_length=1)
    # Immutable once created, changing it replaces the role
    role_name: str = Field(alias="role-name", min_length=1)
    rights: list[Right] = Field(min_length=1)

    @field_validator("rights")
    @classmethod
    def check_rights(cls, rights: list[Right]) -> list[Right]:
        seen: set[str] = set()
        for index, right in enumerate(rights):
            validate_right(right.right, index)
            if right.right in seen:
                msg = f"rights.{index} duplicates right {right.right}"
                raise ValueError(msg)
            seen.add(right.right)
        return rights


class TeamRoleState(BaseModel):
    """The tracked state of a team role that exists in Opsgenie."""

    id: str
    team_id: str
    role_name: str
    rights: list[Right] = Field(default_factory=list)
