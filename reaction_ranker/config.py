"""Configuration for the Issue Reaction Ranker."""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

from .errors import ConfigurationError

# Target repository (fixed for this tool)
DEFAULT_OWNER = "angular"
DEFAULT_REPO = "angular"

# GitHub REST API
GITHUB_API_URL = "https://api.github.com"
GITHUB_ACCEPT = "application/vnd.github+json"
GITHUB_API_VERSION = "2022-11-28"
USER_AGENT = "issue-reaction-ranker"
ISSUES_PER_PAGE = 100  # First page only
REQUEST_TIMEOUT_S = 30.0

# Reaction contents that move the score; everything else weighs 0
SCORE_WEIGHTS = {"+1": 1, "-1": -1}


@dataclass(frozen=True)
class RankerConfig:
    token: str
    owner: str = DEFAULT_OWNER
    repo: str = DEFAULT_REPO
    user_agent: str = USER_AGENT
    base_url: str = GITHUB_API_URL
    timeout_s: float = REQUEST_TIMEOUT_S

    @classmethod
    def from_env(cls, *, timeout_s: float = REQUEST_TIMEOUT_S) -> "RankerConfig":
        # Values already in the environment take precedence over .env
        load_dotenv()
        tok = os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
        if not tok:
            raise ConfigurationError(
                "Missing GitHub token. Set GITHUB_TOKEN (recommended) or GH_TOKEN, or add it to a .env file."
            )
        return cls(token=tok, timeout_s=timeout_s)
