"""Rich terminal output for specreview.

Renders PR diagnostics and rule summaries with TTY-awareness.  Text taken
from the PR (titles, bodies, paths) is untrusted and stripped of ANSI escape
sequences before display.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich.theme import Theme

from .models import CheckStatus

if TYPE_CHECKING:
    from collections.abc import Sequence

    from .github.models import PullRequest
    from .models import FileClassification, RuleOutcome

__all__ = [
    "console",
    "render_classification",
    "render_outcomes",
    "render_pull_request",
    "sanitize_error",
    "sanitize_for_terminal",
]

ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*[a-zA-Z]")

SPECREVIEW_THEME = Theme(
    {
        "info": "dim cyan",
        "warning": "yellow",
        "danger": "bold red",
        "success": "bold green",
        "muted": "dim white",
        "brand": "bold cyan",
    }
)

console = Console(theme=SPECREVIEW_THEME)

_STATUS_STYLES: dict[CheckStatus, tuple[str, str]] = {
    CheckStatus.PASS: ("PASS", "success"),
    CheckStatus.FAIL: ("FAIL", "danger"),
    CheckStatus.REVIEW: ("REVIEW", "warning"),
}


def render_pull_request(pr: PullRequest) -> str:
    """Describe the PR being reviewed on a single line."""
    return (
        f"PR#{pr.number}({sanitize_for_terminal(pr.title)}), "
        f"changed files: {pr.changed_files}, review comments: {pr.review_comments}, "
        f"url={pr.issue_url}"
    )


def render_classification(classification: FileClassification) -> str:
    """List the spec, javadoc and remaining files of the PR."""
    lines = [
        f"specification name: {sanitize_for_terminal(classification.spec_name)}",
        f"specification version: {sanitize_for_terminal(classification.spec_version)}",
    ]
    buckets = (
        ("SpecFiles", classification.spec_files),
        ("JavadocFiles", classification.javadoc_files),
        ("RemainingFiles", classification.other_files),
    )
    for heading, paths in buckets:
        lines.append("")
        lines.append(f"{heading}:")
        lines.extend(f"  {sanitize_for_terminal(path)}" for path in paths)
    return "\n".join(lines)


def render_outcomes(
    outcomes: Sequence[RuleOutcome],
    *,
    force_plain: bool = False,
) -> str:
    """Render rule outcomes as a summary table.

    Args:
        outcomes: Evaluated rules, in report order.
        force_plain: If True, return plain text regardless of TTY.

    Returns:
        Formatted summary string.
    """
    if force_plain or not console.is_terminal:
        lines = ["Checklist Summary:"]
        for index, outcome in enumerate(outcomes, start=1):
            label, _ = _STATUS_STYLES[outcome.status]
            lines.append(f"  {index:>2}. {label:<6} {outcome.rule_id}")
            lines.extend(f"        {sanitize_for_terminal(d)}" for d in outcome.details)
        return "\n".join(lines)

    table = Table(title="Checklist Summary", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="muted")
    table.add_column("Rule", style="cyan")
    table.add_column("Status")
    table.add_column("Details", style="muted")

    for index, outcome in enumerate(outcomes, start=1):
        label, style = _STATUS_STYLES[outcome.status]
        table.add_row(
            str(index),
            outcome.rule_id,
            f"[{style}]{label}[/{style}]",
            Text(sanitize_for_terminal("\n".join(outcome.details))),
        )

    with console.capture() as capture:
        console.print(table)
    result: str = capture.get()
    return result


def sanitize_for_terminal(text: str) -> str:
    """Strip ANSI escape sequences from untrusted content.

    Args:
        text: Potentially untrusted text to sanitize.

    Returns:
        Text with all ANSI escape sequences removed.
    """
    return ANSI_ESCAPE_PATTERN.sub("", text)


def sanitize_error(error: str | Exception, *, max_length: int = 200) -> str:
    """Sanitize error messages for user display.

    Args:
        error: Error message or exception to sanitize.
        max_length: Maximum length of returned message.

    Returns:
        Sanitized, truncated error message.
    """
    message = str(error) if isinstance(error, Exception) else error
    message = ANSI_ESCAPE_PATTERN.sub("", message)

    if len(message) > max_length:
        message = message[:max_length] + "..."

    return message
