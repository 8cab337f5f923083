from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .errors import MalformedChecklistError

UNKNOWN = "unknown"


class ChecklistItemKind(Enum):
    """Checkbox items of the specification PR template, in template order."""

    SPEC_DIR = "spec-dir"
    SPEC_PDF = "spec-pdf"
    SPEC_HTML = "spec-html"
    SPEC_INDEX = "spec-index"
    SPEC_TCK_PR = "spec-tck-pr"
    SPEC_TCK_RR = "spec-tck-rr"
    RR_UPDATED = "rr-updated"
    RR_GEN_IP_LOG = "rr-gen-ip-log"
    RR_EMAIL_PMC = "rr-email-pmc"
    RR_START_REVIEW = "rr-start-review"
    API_STAGE_REPO = "api-stage-repo"
    TCK_STAGE_URL = "tck-stage-url"
    CCR_URL = "ccr-url"
    JAVADOC_DIR = "javadoc-dir"
    NONE = "none"

    @classmethod
    def template_items(cls) -> list[ChecklistItemKind]:
        return [kind for kind in cls if kind is not cls.NONE]

    @classmethod
    def at_position(cls, position: int) -> ChecklistItemKind:
        """Return the kind of the checkbox found at ``position`` (zero-based).

        Raises:
            MalformedChecklistError: If the template has no item at that position.
        """
        items = cls.template_items()
        if position < 0 or position >= len(items):
            raise MalformedChecklistError(position)
        return items[position]


class CheckStatus(str, Enum):
    PASS = "pass"  # noqa: S105  # nosec B105
    FAIL = "fail"  # noqa: S105
    REVIEW = "review"


@dataclass(frozen=True)
class ChecklistRecord:
    kind: ChecklistItemKind
    label: str
    value: str = ""
    checked: bool = False


@dataclass(frozen=True)
class FileClassification:
    spec_files: tuple[str, ...] = ()
    javadoc_files: tuple[str, ...] = ()
    other_files: tuple[str, ...] = ()
    spec_name: str = UNKNOWN
    spec_version: str = UNKNOWN
    spec_pdf: str | None = None
    spec_html: str | None = None

    @property
    def total(self) -> int:
        return len(self.spec_files) + len(self.javadoc_files) + len(self.other_files)


@dataclass(frozen=True)
class RuleOutcome:
    rule_id: str
    title: str
    status: CheckStatus
    details: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return "\n".join((self.title, *self.details))
