"""Configuration loading for repomaker.

Config sources (in priority order):
1. Explicit arguments / CLI options
2. Environment variables (REPOMAKER_GITHUB_TOKEN, etc.)
3. .env file in current directory
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlparse

from dotenv import load_dotenv

from repomaker.github.client import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

load_dotenv()

DEFAULT_REPO_NAME = "myRepo"


@dataclass(frozen=True)
class Config:
    github_token: str = ""
    api_url: str = DEFAULT_BASE_URL
    timeout: int = DEFAULT_TIMEOUT
    repo_name: str = DEFAULT_REPO_NAME

    @classmethod
    def load(cls) -> Config:
        return cls(
            github_token=os.getenv("REPOMAKER_GITHUB_TOKEN", ""),
            api_url=os.getenv("REPOMAKER_API_URL", DEFAULT_BASE_URL),
            timeout=int(os.getenv("REPOMAKER_TIMEOUT", str(DEFAULT_TIMEOUT))),
            repo_name=os.getenv("REPOMAKER_REPO_NAME", DEFAULT_REPO_NAME),
        )

    def validate(self) -> list[str]:
        """Return a list of config issues."""
        issues = []
        if not self.github_token:
            issues.append("GitHub token not set (REPOMAKER_GITHUB_TOKEN)")
        if urlparse(self.api_url).scheme not in ("http", "https"):
            issues.append(f"API URL must be http(s), got {self.api_url!r} (REPOMAKER_API_URL)")
        if self.timeout <= 0:
            issues.append(f"Timeout must be positive, got {self.timeout} (REPOMAKER_TIMEOUT)")
        return issues
