from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from specreview_core import redact

from . import __version__
from .config import DEFAULT_PR_NUMBER, load_settings
from .errors import ConfigError, GitHubError, MalformedChecklistError
from .github import GitHubClient
from .output import (
    console,
    render_classification,
    render_outcomes,
    render_pull_request,
    sanitize_error,
    sanitize_for_terminal,
)
from .parser import checked_kinds
from .report import summarize
from .service import review_pull_request

EXIT_OK = 0
EXIT_CONFIG = 2
EXIT_MALFORMED = 3
EXIT_GITHUB = 4

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _build_parser()
    parsed = parser.parse_args(list(argv) if argv is not None else sys.argv[1:])
    _configure_logging(parsed.verbose)

    try:
        settings = load_settings(pr_number=parsed.pr_number, repository=parsed.repo)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_CONFIG

    logger.debug("loaded %r", settings)

    try:
        with GitHubClient(settings.github_config()) as client:
            result = review_pull_request(client, settings.pr_number, update=not parsed.dry_run)
    except MalformedChecklistError as exc:
        print(f"Malformed checklist template: {exc}", file=sys.stderr)
        return EXIT_MALFORMED
    except GitHubError as exc:
        print(f"GitHub error: {sanitize_error(redact(str(exc)))}", file=sys.stderr)
        return EXIT_GITHUB

    records = result.records
    print(render_pull_request(result.pull_request))
    print(f"Parsed {len(records)} checklist items, {len(checked_kinds(records))} checked")
    print(render_classification(result.classification))
    print(render_outcomes(result.outcomes))

    counts = summarize(result.outcomes)
    console.print(
        ", ".join(f"{status.value}: {count}" for status, count in counts.items()),
        style="info",
    )
    print(sanitize_for_terminal(result.report))

    if parsed.dry_run:
        console.print("Dry run, comment not updated", style="muted")
    elif result.updated_comment_id is not None:
        console.print(f"Updated comment {result.updated_comment_id}", style="success")
    else:
        console.print("No spec review checklist comment to update", style="warning")
    return EXIT_OK


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="specreview",
        description="Check a specification PR against the spec review checklist",
    )
    parser.add_argument(
        "pr_number",
        nargs="?",
        type=int,
        default=DEFAULT_PR_NUMBER,
        help=f"Pull request number (default: {DEFAULT_PR_NUMBER})",
    )
    parser.add_argument("--repo", type=str, help="Repository as owner/name")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the report without updating the PR comment",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


if __name__ == "__main__":
    raise SystemExit(main())
