from .team_role_synchronizer import TeamRoleSynchronizer

__all__ = ["TeamRoleSynchronizer"]
