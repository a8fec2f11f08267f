from .team_role import TeamRoleResource, map_rights

__all__ = ["TeamRoleResource", "map_rights"]
