"""Errors raised while creating a repository through the GitHub API."""

from __future__ import annotations


class GitHubError(Exception):
    """Base class for every failure of a repository creation call."""


class TransportError(GitHubError):
    """The request could not be built or sent (DNS, refused connection, TLS...)."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"HTTP client error: {cause}")
        self.cause = cause


class UnexpectedStatusError(GitHubError):
    """The server answered with anything other than 201 Created."""

    def __init__(self, code: int) -> None:
        super().__init__(f"Unexpected HTTP response code: {code}")
        self.code = code


class BodyParseError(GitHubError):
    """The response body is not valid JSON."""

    def __init__(self, cause: Exception) -> None:
        super().__init__(f"JSON parser error: {cause}")
        self.cause = cause


class MissingFieldError(GitHubError):
    """The response JSON lacks a string value for a required field."""

    def __init__(self, field: str) -> None:
        super().__init__(f"Missing field in HTTP response: {field}")
        self.field = field
