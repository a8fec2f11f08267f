import json
from collections.abc import Iterator
from typing import Any
from unittest.mock import MagicMock

import pytest
from requests import Response

from opsgenie_sync.clients import OpsgenieClient
from opsgenie_sync.logger import get_log_status_filter


def make_response(status_code: int = 200, payload: Any = None) -> Response:
    resp = Response()
    resp.status_code = status_code
    resp._content = b"" if payload is None else json.dumps(payload).encode("utf-8")
    return resp


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.headers = {}
    return session


@pytest.fixture
def client(session: MagicMock) -> OpsgenieClient:
    return OpsgenieClient("test-key", session=session)


@pytest.fixture(autouse=True)
def reset_log_status() -> Iterator[None]:
    log_status_filter = get_log_status_filter()
    assert log_status_filter is not None
    log_status_filter.had_error = log_status_filter.had_warning = False
    yield
    log_status_filter.had_error = log_status_filter.had_warning = False


@pytest.fixture(name="make_response")
def make_response_fixture() -> Any:
    return make_response
