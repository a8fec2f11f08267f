from abc import ABC, abstractmethod

from opsgenie_sync.logger import get_app_logger
from opsgenie_sync.models import TeamRoleConfig
from opsgenie_sync.state import StateStore


class AbstractSynchronizer(ABC):
    @abstractmethod
    def __init__(self, roles: dict[str, TeamRoleConfig], state: StateStore) -> None:
        """
        Initialize the AbstractSynchronizer.

        Sets the role definitions and the tracked state and creates a logger.
        """
        self.roles = roles
        self.state = state
        self.logger = get_app_logger()

    @abstractmethod
    def sync(self) -> None:
        msg = "Subclasses must implement this method"
        raise NotImplementedError(msg)
