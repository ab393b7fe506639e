from __future__ import annotations

from dataclasses import dataclass
from typing import Any


class PayloadShapeError(ValueError):
    pass


def _require_list(payload: Any) -> list[Any]:
    if not isinstance(payload, list):
        raise PayloadShapeError(f"expected a JSON array, got {type(payload).__name__}")
    return payload


def _require_object(item: Any) -> dict[str, Any]:
    if not isinstance(item, dict):
        raise PayloadShapeError(f"expected a JSON object, got {type(item).__name__}")
    return item


@dataclass(frozen=True)
class Issue:
    number: int
    title: str
    is_pull_request: bool = False

    @classmethod
    def from_payload(cls, item: Any) -> "Issue":
        data = _require_object(item)
        number = data.get("number")
        # bool is an int subclass; reject it explicitly
        if isinstance(number, bool) or not isinstance(number, int) or number < 0:
            raise PayloadShapeError(f"issue 'number' must be a non-negative integer, got {number!r}")
        title = data.get("title")
        if not isinstance(title, str):
            raise PayloadShapeError(f"issue #{number} 'title' must be a string, got {title!r}")
        # Any pull_request object marks a PR, even an empty one
        return cls(number=number, title=title, is_pull_request=data.get("pull_request") is not None)


@dataclass(frozen=True)
class Reaction:
    content: str

    @classmethod
    def from_payload(cls, item: Any) -> "Reaction":
        data = _require_object(item)
        content = data.get("content")
        if not isinstance(content, str):
            raise PayloadShapeError(f"reaction 'content' must be a string, got {content!r}")
        return cls(content=content)


@dataclass(frozen=True)
class ScoreEntry:
    issue_number: int
    score: int


def decode_issues(payload: Any) -> list[Issue]:
    return [Issue.from_payload(item) for item in _require_list(payload)]


def decode_reactions(payload: Any) -> list[Reaction]:
    return [Reaction.from_payload(item) for item in _require_list(payload)]
