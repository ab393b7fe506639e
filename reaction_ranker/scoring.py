from __future__ import annotations

from typing import Iterable, Sequence

from .config import SCORE_WEIGHTS
from .types import Issue, Reaction, ScoreEntry


def reaction_weight(content: str) -> int:
    return SCORE_WEIGHTS.get(content, 0)


def tally_scores(issue_reactions: Iterable[tuple[Issue, Sequence[Reaction]]]) -> dict[int, int]:
    """
    Net score per issue number.

    An issue gets an entry only once one of its reactions is seen, so issues
    without reactions are absent while reactions summing to zero give 0.
    Keys are in first-reaction order.
    """
    scores: dict[int, int] = {}
    for issue, reactions in issue_reactions:
        for reaction in reactions:
            scores[issue.number] = scores.get(issue.number, 0) + reaction_weight(reaction.content)
    return scores


def rank_scores(scores: dict[int, int]) -> list[ScoreEntry]:
    # sorted() is stable: ties keep insertion order
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    return [ScoreEntry(issue_number=number, score=score) for number, score in ranked]
