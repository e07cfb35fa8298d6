"""Thin wrapper around PyGithub auth and requests for creating private repositories."""

from __future__ import annotations

import json
import logging
from typing import Any

import requests
from github import Auth, Consts

from repomaker.github.errors import (
    BodyParseError,
    MissingFieldError,
    TransportError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = Consts.DEFAULT_BASE_URL
DEFAULT_TIMEOUT = Consts.DEFAULT_TIMEOUT  # seconds

CREATE_REPO_PATH = "/user/repos"
CREATED = 201
URL_FIELD = "html_url"


def build_create_payload(name: str) -> dict[str, Any]:
    """Request body for POST /user/repos. Visibility is always private."""
    return {"name": name, "private": True}


class GitHubClient:
    """Authenticated GitHub client that creates private repositories.

    Usage:
        client = GitHubClient(token="ghp_...", base_url="https://api.github.com")
        url = client.create_repository("myRepo")

    Construction stores the settings and does nothing else. Each call to
    create_repository sends exactly one request: no retries, no redirects.
    """

    def __init__(
        self,
        token: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: int = DEFAULT_TIMEOUT,
    ) -> None:
        self._token = token
        self._base_url = base_url
        self._timeout = timeout
        self._session: requests.Session | None = None

    @property
    def token(self) -> str:
        return self._token

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def session(self) -> requests.Session:
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _headers(self) -> dict[str, str]:
        # Auth.Token asserts on an empty token
        auth = Auth.Token(self._token)
        return {
            "Authorization": f"{auth.token_type} {auth.token}",
            "Content-Type": "application/json",
            "User-Agent": Consts.DEFAULT_USER_AGENT,
        }

    def create_repository(self, name: str) -> str:
        """Create a private repository and return its web URL.

        Raises:
            TransportError: the request could not be built or sent.
            UnexpectedStatusError: the response status was not 201 (3xx included).
            BodyParseError: the response body is not JSON.
            MissingFieldError: the JSON body has no string ``html_url``.
        """
        logger.debug(f"Creating private repository {name!r} at {self._base_url}")
        try:
            response = self.session.post(
                f"{self._base_url}{CREATE_REPO_PATH}",
                data=json.dumps(build_create_payload(name)),
                headers=self._headers(),
                timeout=self._timeout,
                allow_redirects=False,
            )
        except (requests.RequestException, AssertionError, UnicodeError, ValueError) as e:
            logger.warning(f"Transport failure creating {name!r}: {e}")
            raise TransportError(e) from e

        if response.status_code != CREATED:
            logger.warning(f"Unexpected status {response.status_code} creating {name!r}")
            raise UnexpectedStatusError(response.status_code)

        output = response.text
        try:
            body = json.loads(output)
        except json.JSONDecodeError as e:
            logger.warning(f"Failed to parse JSON response for {name!r}: {output[:200]}")
            raise BodyParseError(e) from e

        url = body.get(URL_FIELD) if isinstance(body, dict) else None
        if not isinstance(url, str):
            logger.warning(f"Response for {name!r} has no {URL_FIELD}")
            raise MissingFieldError(URL_FIELD)

        return url

    def close(self) -> None:
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> GitHubClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
