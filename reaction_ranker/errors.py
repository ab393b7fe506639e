from __future__ import annotations


class RankerError(Exception):
    pass


class ConfigurationError(RankerError):
    pass


class GitHubApiError(RankerError):
    pass


class ResponseDecodeError(GitHubApiError):
    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Unexpected response body from {url}: {reason}")
        self.url = url
        self.reason = reason
