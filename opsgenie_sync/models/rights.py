# Every right an Opsgenie team role can grant or deny
VALID_TEAM_ROLE_RIGHTS: tuple[str, ...] = (
    "manage-members",
    "edit-team-roles",
    "delete-team-roles",
    "access-member-profiles",
    "edit-member-profiles",
    "edit-routing-rules",
    "delete-routing-rules",
    "edit-escalations",
    "delete-escalations",
    "edit-schedules",
    "delete-schedules",
    "edit-integrations",
    "delete-integrations",
    "edit-heartbeats",
    "delete-heartbeats",
    "access-reports",
    "edit-services",
    "delete-services",
    "edit-rooms",
    "delete-rooms",
    "send-service-status-update",
)


def validate_right(value: str, index: int) -> str:
    """Check that a right name is one of the known rights (case-sensitive)."""
    if value not in VALID_TEAM_ROLE_RIGHTS:
        msg = (
            f"expected rights.{index} to be one of "
            f"[{' '.join(VALID_TEAM_ROLE_RIGHTS)}], got {value}"
        )
        raise ValueError(msg)
    return value
