"""Parse the checklist section of a specification PR body.

Each checkbox line of the PR template starts a record; the first non-blank
line after it carries the record's value (a link, a path, ...).  Kinds are
assigned by position, so the Nth checkbox maps to the Nth template item.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import replace
from functools import reduce

from .models import ChecklistItemKind, ChecklistRecord

__all__ = [
    "CHECKBOX_PATTERN",
    "checked_kinds",
    "find_record",
    "parse_checklist",
]

logger = logging.getLogger(__name__)

CHECKBOX_PATTERN = re.compile(r"\s*- \[[\sx]\].*")
CHECKED_MARK = "[x]"


def parse_checklist(body: str | None) -> list[ChecklistRecord]:
    """Parse a PR body into checklist records.

    Args:
        body: Raw PR description. ``None`` is treated as an empty body.

    Returns:
        Records in template order. The list is shorter than the template when
        trailing items are missing.

    Raises:
        MalformedChecklistError: If the body has more checkbox lines than the
            template defines.
    """
    lines = (body or "").split("\n")
    records: list[ChecklistRecord] = reduce(_consume_line, lines, [])
    logger.debug("parsed %d checklist items", len(records))
    return records


def find_record(
    records: Sequence[ChecklistRecord], kind: ChecklistItemKind
) -> ChecklistRecord | None:
    return next((record for record in records if record.kind is kind), None)


def _consume_line(records: list[ChecklistRecord], line: str) -> list[ChecklistRecord]:
    if CHECKBOX_PATTERN.fullmatch(line):
        record = _start_record(line, position=len(records))
        logger.debug("checkbox %r maps to %s", record.label, record.kind.name)
        return [*records, record]

    if not records or records[-1].value:
        return records

    value = line.strip()
    if not value:
        return records
    current = records[-1]
    logger.debug("value for %s is %r", current.kind.name, value)
    return [*records[:-1], replace(current, value=value)]


def _start_record(line: str, *, position: int) -> ChecklistRecord:
    close = line.index("]")
    return ChecklistRecord(
        kind=ChecklistItemKind.at_position(position),
        label=line[close + 1 :].rstrip("\r"),
        checked=CHECKED_MARK in line[: close + 1],
    )


def checked_kinds(records: Iterable[ChecklistRecord]) -> list[ChecklistItemKind]:
    return [record.kind for record in records if record.checked]
