""" Shared fixtures """

import json

import pytest
from requests.models import Response

from randomreddit.typing_custom import RedditUser


def make_response(status: int, payload=None, headers: dict | None = None, text: str | None = None) -> Response:
    """ Builds a requests Response without touching the network """
    response = Response()
    response.status_code = status
    response.encoding = "utf-8"
    if text is not None:
        response._content = text.encode("utf-8")
    elif payload is not None:
        response._content = json.dumps(payload).encode("utf-8")
    else:
        response._content = b""
    response.headers.update(headers if headers is not None else {})
    return response


@pytest.fixture(name="user")
def fixture_user():
    """ Fixture of the Reddit credentials """
    return RedditUser(
        username="tester",
        password="hunter2",
        client_id="client-id",
        client_secret="client-secret",
        user_agent="linux:random-reddit:test (by /u/tester)",
    )
