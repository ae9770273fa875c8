""" This module contains the Reddit API transport used by RandomReddit. """

import sys
from time import sleep
from typing import Any, Optional
from logging import Logger

from prawcore import Requestor, TrustedAuthenticator, ScriptAuthorizer, OAuthException, ResponseException
from requests.models import Response

from randomreddit.httpclient import HTTPClient
from randomreddit.typing_custom import RedditUser
from randomreddit.utils import NullLogger, get_version


def default_user_agent(user: RedditUser) -> str:
    """ Builds a user agent in the format Reddit asks API clients to use """
    return f"{sys.platform}:random-reddit:{get_version()} (by /u/{user.username})"


class RedditAPI:
    """
    Authenticated access to the Reddit API for a script app.

    ``get`` answers with a ``(status, payload)`` pair. When Reddit keeps refusing access
    after a token refresh, or refuses to hand out a token at all, it answers with None instead.
    """
    _user: RedditUser
    _logger: Logger
    _authorizer: ScriptAuthorizer
    _http_client: HTTPClient
    _oauth_url: str

    def __init__(self, user: RedditUser, logger: Logger | None = None):
        self._user = user
        self._logger = logger if logger is not None else NullLogger()

        user_agent = user.user_agent if user.user_agent else default_user_agent(user)
        requestor = Requestor(user_agent=user_agent)
        authenticator = TrustedAuthenticator(requestor=requestor, client_id=user.client_id, client_secret=user.client_secret)
        self._authorizer = ScriptAuthorizer(authenticator=authenticator, username=user.username, password=user.password)
        self._oauth_url = requestor.oauth_url
        self._http_client = HTTPClient({"User-Agent": user_agent}, self._logger)

    def logged_in(self) -> bool:
        """ Returns True if Reddit grants a token for the credentials, False otherwise. """
        try:
            self._authorizer.refresh()
            return True
        except (OAuthException, ResponseException):
            return False

    def get(self, endpoint: str, params: dict | None = None) -> Optional[tuple[int, Any]]:
        """ Sends an authenticated GET request to the API endpoint (e.g. ``/r/aww/random``). """
        retries = 0
        refreshed = False
        refresh_now = False
        while True:
            try:
                response = self._request(endpoint, params, force_refresh=refresh_now)
            except (OAuthException, ResponseException) as e:
                self._logger.debug("Reddit refused to authorize %s: %s", self._user.username, e)
                return None

            refresh_now = False
            status = response.status_code
            if status in (401, 403) and not refreshed:
                self._log_request(f"GET {endpoint} answered {status}, refreshing the access token")
                refreshed = True
                refresh_now = True
                continue
            if status == 403:
                return None

            if retries < self._user.retry_on_server_error:
                if status == 429 and self._user.retry_on_wait:
                    retries += 1
                    wait = self._ratelimit_reset(response)
                    self._log_request(f"GET {endpoint} is rate limited, waiting {wait}s")
                    sleep(wait)
                    continue
                if status >= 500:
                    retries += 1
                    self._log_request(f"GET {endpoint} answered {status}, retrying in {self._user.retry_delay}s")
                    sleep(self._user.retry_delay)
                    continue

            self._log_request(f"GET {endpoint} answered {status}")
            return status, self._payload(response)

    def _request(self, endpoint: str, params: dict | None, force_refresh: bool = False) -> Response:
        if force_refresh or not self._authorizer.is_valid():
            self._authorizer.refresh()

        query = {"raw_json": 1, **(params if params is not None else {})}
        self._log_request(f"GET {endpoint} {query}")
        return self._http_client.get(
            f"{self._oauth_url}{endpoint}",
            query,
            headers={"Authorization": f"bearer {self._authorizer.access_token}"},
        )

    def _ratelimit_reset(self, response: Response) -> float:
        try:
            return float(response.headers["x-ratelimit-reset"])
        except (KeyError, ValueError):
            return self._user.retry_delay

    def _log_request(self, msg: str) -> None:
        if self._user.logs:
            self._logger.debug(msg)

    @staticmethod
    def _payload(response: Response) -> Any:
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text
