import os
from functools import lru_cache
from typing import Any
from urllib.parse import quote

import requests

from opsgenie_sync.logger import get_app_logger

DEFAULT_API_URL = "https://api.opsgenie.com"


class OpsgenieClient:
    """Python client wrapper of the Opsgenie team role REST API."""

    TIMEOUT = 10  # timeout in seconds

    def __init__(
        self,
        api_key: str,
        api_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.api_url = api_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "Authorization": f"GenieKey {api_key}",
                "Content-Type": "application/json",
            }
        )

    def create_role(
        self, team_id: str, name: str, rights: list[dict[str, Any]]
    ) -> dict[str, Any]:
        """Create a role under the team and return its id and name."""
        response = self._request(
            "POST",
            self._roles_path(team_id),
            params={"teamIdentifierType": "id"},
            json={"name": name, "rights": rights},
        )
        return response["data"]  # type: ignore[no-any-return]

    def get_role(
        self,
        team_id: str,
        role_id: str | None = None,
        role_name: str | None = None,
    ) -> dict[str, Any]:
        """Get a role by its id, or by its name when the id is unknown."""
        if role_id:
            identifier, identifier_type = role_id, "id"
        elif role_name:
            identifier, identifier_type = role_name, "name"
        else:
            msg = "Either role_id or role_name must be given"
            raise ValueError(msg)

        response = self._request(
            "GET",
            self._roles_path(team_id, identifier),
            params={"teamIdentifierType": "id", "identifierType": identifier_type},
        )
        return response["data"]  # type: ignore[no-any-return]

    def update_role(
        self,
        team_id: str,
        role_id: str,
        role_name: str,
        rights: list[dict[str, Any]],
    ) -> dict[str, Any]:
        """Update a role, the rights are replaced as a whole."""
        return self._request(
            "PATCH",
            self._roles_path(team_id, role_id),
            params={"teamIdentifierType": "id", "identifierType": "id"},
            json={"name": role_name, "rights": rights},
        )

    def delete_role(self, team_id: str, role_id: str) -> dict[str, Any]:
        """Delete a role."""
        return self._request(
            "DELETE",
            self._roles_path(team_id, role_id),
            params={"teamIdentifierType": "id", "identifierType": "id"},
        )

    def _roles_path(self, team_id: str, identifier: str | None = None) -> str:
        path = f"/v2/teams/{quote(team_id, safe='')}/roles"
        if identifier is not None:
            path = f"{path}/{quote(identifier, safe='')}"
        return path

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        response = self.session.request(
            method,
            f"{self.api_url}{path}",
            params=params,
            json=json,
            timeout=self.TIMEOUT,
        )
        response.raise_for_status()
        if not response.content:
            return {}
        return response.json()  # type: ignore[no-any-return]


@lru_cache(maxsize=1)
def get_opsgenie_client() -> OpsgenieClient:
    """Get the Opsgenie client. Cache the result for reuse across the app."""
    logger = get_app_logger()

    api_key = os.getenv("OPSGENIE_API_KEY")
    if not api_key:
        msg = "OPSGENIE_API_KEY is not set"
        logger.critical(msg)
        raise RuntimeError(msg)

    return OpsgenieClient(api_key, os.getenv("OPSGENIE_API_URL") or DEFAULT_API_URL)
