"""Run orchestration: list issues, gather reactions, score and report."""

from __future__ import annotations

import logging

from rich.console import Console

from .display import console as default_console
from .display import print_fetched_count, print_gathering, print_ranking
from .github_client import GitHubClient
from .scoring import rank_scores, tally_scores
from .types import Issue, Reaction, ScoreEntry

logger = logging.getLogger(__name__)


def fetch_issues(client: GitHubClient, owner: str, repo: str, out: Console = default_console) -> list[Issue]:
    issues = client.list_open_issues(owner, repo)
    print_fetched_count(len(issues), out)
    return issues


def fetch_reactions(
    client: GitHubClient,
    issue: Issue,
    owner: str,
    repo: str,
    out: Console = default_console,
) -> list[Reaction]:
    print_gathering(issue.number, out)
    return client.list_reactions(issue, owner, repo)


def collect_scores(client: GitHubClient, owner: str, repo: str, out: Console = default_console) -> list[ScoreEntry]:
    """Fetch everything sequentially and return the ranked scores."""
    issues = fetch_issues(client, owner, repo, out)
    gathered = [(issue, fetch_reactions(client, issue, owner, repo, out)) for issue in issues]
    ranked = rank_scores(tally_scores(gathered))
    logger.debug("Scored %d of %d issues in %s/%s", len(ranked), len(issues), owner, repo)
    return ranked


def run(client: GitHubClient, out: Console = default_console) -> list[ScoreEntry]:
    config = client.config
    ranked = collect_scores(client, config.owner, config.repo, out)
    print_ranking(ranked, out)
    return ranked
