"""GitHub REST client for open issues and their reactions.

Every call is a single best-effort attempt: a non-2xx status or a transport
failure yields an empty result so the run can carry on. A 2xx response whose
body cannot be decoded raises ``ResponseDecodeError``.
"""

from __future__ import annotations

import logging
import time
from typing import Any, Callable, Optional

import requests
from rich.console import Console

from .config import GITHUB_ACCEPT, GITHUB_API_VERSION, ISSUES_PER_PAGE, RankerConfig
from .display import make_console
from .errors import ResponseDecodeError
from .types import Issue, PayloadShapeError, Reaction, decode_issues, decode_reactions

logger = logging.getLogger(__name__)

RATE_LIMIT_RESET_HEADER = "x-ratelimit-reset"


def wait_estimate(reset_header: str, now: float) -> str:
    """Human-readable wait until the rate limit resets."""
    try:
        reset = int(reset_header.strip())
    except ValueError:
        return "in sometime"
    remaining = max(0, reset - int(now))
    minutes = remaining // 60
    if minutes > 0:
        return f"after {minutes} minute(s)"
    return f"after {remaining} second(s)"


class GitHubClient:
    """Handles the two GitHub REST endpoints the ranker needs."""

    def __init__(
        self,
        config: RankerConfig,
        *,
        session: Optional[requests.Session] = None,
        console: Optional[Console] = None,
        clock: Callable[[], float] = time.time,
    ):
        self.config = config
        self.session = session or requests.Session()
        self.session.headers.update(self._headers())
        self.console = console or make_console()
        self._clock = clock

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.config.token}",
            "Accept": GITHUB_ACCEPT,
            "User-Agent": self.config.user_agent,
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
        }

    def _report_failed_status(self, response: requests.Response) -> None:
        self.console.print(f"Exited with HTTP status code: {response.status_code}", markup=False)
        reset = response.headers.get(RATE_LIMIT_RESET_HEADER)
        if reset is not None:
            when = wait_estimate(reset, self._clock())
            self.console.print(f"Please try again later {when}!", markup=False)

    def _get_json(self, path: str, params: Optional[dict[str, Any]] = None) -> Any:
        """GET ``path``; returns decoded JSON, or None when the request failed."""
        url = f"{self.config.base_url}{path}"
        try:
            response = self.session.get(url, params=params, timeout=self.config.timeout_s)
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            return None

        logger.debug("GET %s -> %d", url, response.status_code)
        if not 200 <= response.status_code < 300:
            logger.debug("GitHub API returned %d for %s", response.status_code, url)
            self._report_failed_status(response)
            return None

        try:
            return response.json()
        except ValueError as e:
            raise ResponseDecodeError(url, f"invalid JSON ({e})") from e

    def list_open_issues(self, owner: str, repo: str) -> list[Issue]:
        """First page of open issues, pull requests removed, API order kept."""
        path = f"/repos/{owner}/{repo}/issues"
        payload = self._get_json(path, params={"state": "open", "per_page": ISSUES_PER_PAGE})
        if payload is None:
            return []
        try:
            issues = decode_issues(payload)
        except PayloadShapeError as e:
            raise ResponseDecodeError(f"{self.config.base_url}{path}", str(e)) from e
        return [issue for issue in issues if not issue.is_pull_request]

    def list_reactions(self, issue: Issue, owner: str, repo: str) -> list[Reaction]:
        path = f"/repos/{owner}/{repo}/issues/{issue.number}/reactions"
        payload = self._get_json(path)
        if payload is None:
            return []
        try:
            return decode_reactions(payload)
        except PayloadShapeError as e:
            raise ResponseDecodeError(f"{self.config.base_url}{path}", str(e)) from e
