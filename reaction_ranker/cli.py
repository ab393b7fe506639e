from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from .config import REQUEST_TIMEOUT_S, RankerConfig
from .display import console
from .errors import RankerError
from .github_client import GitHubClient
from .ranker import run


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Rank the open issues of the configured GitHub repository by net"
            " +1/-1 reactions."
        )
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=float,
        default=REQUEST_TIMEOUT_S,
        help="Timeout per GitHub API request.",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RankerConfig.from_env(timeout_s=args.timeout_seconds)
        with GitHubClient(config, console=console) as client:
            run(client, console)
    except RankerError as error:
        console.print(f"Error: {error}", markup=False)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
