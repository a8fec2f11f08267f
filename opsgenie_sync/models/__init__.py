from .rights import VALID_TEAM_ROLE_RIGHTS, validate_right
from .team_role import Right, TeamRoleConfig, TeamRoleState, rights_key

__all__ = [
    "VALID_TEAM_ROLE_RIGHTS",
    "Right",
    "TeamRoleConfig",
    "TeamRoleState",
    "rights_key",
    "validate_right",
]
