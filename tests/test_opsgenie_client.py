from unittest.mock import MagicMock, patch

import pytest
import requests

from opsgenie_sync.clients import OpsgenieClient
from opsgenie_sync.clients.opsgenie_client import get_opsgenie_client

RIGHTS = [{"right": "edit-rooms", "granted": True}]


def test_client_sends_genie_key(session: MagicMock, client: OpsgenieClient) -> None:
    assert session.headers["Authorization"] == "GenieKey test-key"
    assert client.api_url == "https://api.opsgenie.com"


def test_create_role(session: MagicMock, client: OpsgenieClient, make_response) -> None:
    session.request.return_value = make_response(
        201, {"data": {"id": "role-1", "name": "responders"}, "took": 0.1}
    )

    result = client.create_role("team-1", "responders", RIGHTS)

    assert result == {"id": "role-1", "name": "responders"}
    session.request.assert_called_once_with(
        "POST",
        "https://api.opsgenie.com/v2/teams/team-1/roles",
        params={"teamIdentifierType": "id"},
        json={"name": "responders", "rights": RIGHTS},
        timeout=OpsgenieClient.TIMEOUT,
    )


def test_get_role_prefers_id(session: MagicMock, client: OpsgenieClient, make_response) -> None:
    session.request.return_value = make_response(
        200, {"data": {"id": "role-1", "name": "responders", "rights": RIGHTS}}
    )

    result = client.get_role("team-1", role_id="role-1", role_name="responders")

    assert result["rights"] == RIGHTS
    session.request.assert_called_once_with(
        "GET",
        "https://api.opsgenie.com/v2/teams/team-1/roles/role-1",
        params={"teamIdentifierType": "id", "identifierType": "id"},
        json=None,
        timeout=OpsgenieClient.TIMEOUT,
    )


def test_get_role_by_name(session: MagicMock, client: OpsgenieClient, make_response) -> None:
    session.request.return_value = make_response(200, {"data": {"name": "on call"}})

    client.get_role("team-1", role_name="on call")

    args, kwargs = session.request.call_args
    assert args[1] == "https://api.opsgenie.com/v2/teams/team-1/roles/on%20call"
    assert kwargs["params"]["identifierType"] == "name"


def test_get_role_needs_an_identifier(client: OpsgenieClient) -> None:
    with pytest.raises(ValueError, match="role_id or role_name"):
        client.get_role("team-1")


def test_update_role_replaces_rights(
    session: MagicMock, client: OpsgenieClient, make_response
) -> None:
    session.request.return_value = make_response(200, {"result": "Updated"})

    client.update_role("team-1", "role-1", "responders", RIGHTS)

    args, kwargs = session.request.call_args
    assert args == ("PATCH", "https://api.opsgenie.com/v2/teams/team-1/roles/role-1")
    assert kwargs["json"] == {"name": "responders", "rights": RIGHTS}


def test_delete_role_accepts_empty_body(
    session: MagicMock, client: OpsgenieClient, make_response
) -> None:
    session.request.return_value = make_response(204)

    assert client.delete_role("team-1", "role-1") == {}
    assert session.request.call_args.args[0] == "DELETE"


def test_api_errors_are_raised_unchanged(
    session: MagicMock, client: OpsgenieClient, make_response
) -> None:
    session.request.return_value = make_response(422, {"message": "Invalid right"})

    with pytest.raises(requests.HTTPError) as exc_info:
        client.create_role("team-1", "responders", RIGHTS)

    assert exc_info.value.response.status_code == 422


def test_eu_api_url_is_normalized(session: MagicMock) -> None:
    client = OpsgenieClient("key", "https://api.eu.opsgenie.com/", session=session)

    assert client.api_url == "https://api.eu.opsgenie.com"


def test_get_opsgenie_client_requires_api_key() -> None:
    get_opsgenie_client.cache_clear()
    with (
        patch.dict("os.environ", {"OPSGENIE_API_KEY": ""}),
        pytest.raises(RuntimeError, match="OPSGENIE_API_KEY is not set"),
    ):
        get_opsgenie_client()
    get_opsgenie_client.cache_clear()


def test_get_opsgenie_client_reads_environment() -> None:
    get_opsgenie_client.cache_clear()
    env = {"OPSGENIE_API_KEY": "secret", "OPSGENIE_API_URL": "https://api.eu.opsgenie.com"}
    with patch.dict("os.environ", env):
        client = get_opsgenie_client()
    get_opsgenie_client.cache_clear()

    assert client.api_url == "https://api.eu.opsgenie.com"
    assert client.session.headers["Authorization"] == "GenieKey secret"
