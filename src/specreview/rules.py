"""Evaluate the specification PR checklist.

Rules run in a fixed order so the rendered report always lists the same
items.  A rule that cannot be verified automatically reports
``CheckStatus.REVIEW`` and is left to the reviewer.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from specreview_core import redact

from .models import (
    UNKNOWN,
    ChecklistItemKind,
    ChecklistRecord,
    CheckStatus,
    FileClassification,
    RuleOutcome,
)
from .parser import find_record

__all__ = [
    "LinkProbe",
    "TRUSTED_TCK_PREFIXES",
    "evaluate_rules",
]

logger = logging.getLogger(__name__)

LinkProbe = Callable[[str], int]

TEMPLATE_URL = "https://github.com/jakartaee/specifications/blob/master/pull_request_template.md"
SPEC_PAGE_TEMPLATE_URL = (
    "https://github.com/jakartaee/specification-committee/blob/master/spec_page_template.md"
)
SPEC_INDEX_TEMPLATE_URL = (
    "https://github.com/jakartaee/specification-committee/blob/master/spec_index_template.md"
)
TRUSTED_TCK_PREFIXES = ("http://download.eclipse.org/", "https://download.eclipse.org/")

TEMPLATE_TITLE = f"PR uses [template]({TEMPLATE_URL})"
DIRECTORY_TITLE = "Directory of form {spec}/x.y"
PDF_TITLE = "PDF of form jakarta-{spec}-spec-x.y.pdf ('-spec' preferred but not required)"
HTML_TITLE = "HTML of form jakarta-{spec}-spec-x.y.html ('-spec' preferred but not required)"
VERSION_INDEX_TITLE = (
    f"Index page {{spec}}/x.y/_index.md following [template]({SPEC_PAGE_TEMPLATE_URL})"
)
SPEC_INDEX_TITLE = f"Index page {{spec}}/_index.md following [template]({SPEC_INDEX_TEMPLATE_URL})"
OTHER_FILES_TITLE = "No other files"
STAGING_TITLE = (
    "Staging repository link of the form https://jakarta.oss.sonatype.org/content/repositories/"
    "staging/jakarta/{spec}/jakarta.{spec}-api/x.y.z/"
)
TCK_TITLE = "EFTL TCK link of the form http://download.eclipse.org/.../+.zip"
CCR_TITLE = (
    "Compatibility certification link of the form "
    "https://github.com/eclipse-ee4j/{project}/#{issue}"
)
APIDOCS_TITLE = "(Optional) Second PR for just apidocs"


def evaluate_rules(
    records: Sequence[ChecklistRecord],
    classification: FileClassification,
    probe: LinkProbe,
) -> list[RuleOutcome]:
    name = classification.spec_name
    version = classification.spec_version
    return [
        _check_template(records),
        _check_directory(name, version),
        _check_artifact_name(
            "spec-pdf", PDF_TITLE, classification.spec_pdf, name, version, "pdf"
        ),
        _check_artifact_name(
            "spec-html", HTML_TITLE, classification.spec_html, name, version, "html"
        ),
        RuleOutcome("spec-version-index", VERSION_INDEX_TITLE, CheckStatus.REVIEW),
        RuleOutcome("spec-index", SPEC_INDEX_TITLE, CheckStatus.REVIEW),
        _check_other_files(classification.other_files),
        _check_staging_repository(records, probe),
        _check_tck_archive(records, probe),
        _check_compatibility_certification(records),
        RuleOutcome("apidocs-pr", APIDOCS_TITLE, CheckStatus.REVIEW),
    ]


def _check_template(records: Sequence[ChecklistRecord]) -> RuleOutcome:
    expected = len(ChecklistItemKind) - 1
    if len(records) == expected:
        return RuleOutcome("template", TEMPLATE_TITLE, CheckStatus.PASS)
    return RuleOutcome(
        "template",
        TEMPLATE_TITLE,
        CheckStatus.FAIL,
        (f"Found {len(records)} checklist items, expected {expected}",),
    )


def _check_directory(name: str, version: str) -> RuleOutcome:
    if name != UNKNOWN and version != UNKNOWN:
        return RuleOutcome("spec-directory", DIRECTORY_TITLE, CheckStatus.PASS)
    return RuleOutcome(
        "spec-directory",
        DIRECTORY_TITLE,
        CheckStatus.FAIL,
        ("No specification files found",),
    )


def _check_artifact_name(
    rule_id: str,
    title: str,
    filename: str | None,
    name: str,
    version: str,
    extension: str,
) -> RuleOutcome:
    accepted = (
        f"jakarta-{name}-spec-{version}.{extension}",
        f"jakarta-{name}-{version}.{extension}",
    )
    logger.debug("%s: expecting one of %s", rule_id, accepted)
    if filename is None:
        detail = f"No {extension.upper()} found"
    elif filename in accepted:
        return RuleOutcome(rule_id, title, CheckStatus.PASS)
    else:
        detail = f"{filename} should be {accepted[0]}"
    return RuleOutcome(rule_id, title, CheckStatus.FAIL, (detail,))


def _check_other_files(other_files: Sequence[str]) -> RuleOutcome:
    if not other_files:
        return RuleOutcome("no-other-files", OTHER_FILES_TITLE, CheckStatus.PASS)
    return RuleOutcome(
        "no-other-files",
        OTHER_FILES_TITLE,
        CheckStatus.FAIL,
        (", ".join(other_files),),
    )


def _check_staging_repository(
    records: Sequence[ChecklistRecord], probe: LinkProbe
) -> RuleOutcome:
    url = _record_value(records, ChecklistItemKind.API_STAGE_REPO)
    if not url:
        return RuleOutcome(
            "staging-repository",
            STAGING_TITLE,
            CheckStatus.FAIL,
            ("No staging repository link provided",),
        )
    problem = _probe_link(url, probe)
    if problem is None:
        return RuleOutcome("staging-repository", STAGING_TITLE, CheckStatus.PASS)
    return RuleOutcome("staging-repository", STAGING_TITLE, CheckStatus.FAIL, (problem,))


def _check_tck_archive(records: Sequence[ChecklistRecord], probe: LinkProbe) -> RuleOutcome:
    url = _record_value(records, ChecklistItemKind.TCK_STAGE_URL)
    if not url:
        return RuleOutcome(
            "tck-archive", TCK_TITLE, CheckStatus.FAIL, ("No TCK archive link provided",)
        )

    details: list[str] = []
    if not url.startswith(TRUSTED_TCK_PREFIXES):
        details.append(f"{url} not under {TRUSTED_TCK_PREFIXES[0]}")
    problem = _probe_link(url, probe)
    if problem is not None:
        details.append(problem)
    status = CheckStatus.FAIL if details else CheckStatus.PASS
    return RuleOutcome("tck-archive", TCK_TITLE, status, tuple(details))


def _check_compatibility_certification(records: Sequence[ChecklistRecord]) -> RuleOutcome:
    if not _record_value(records, ChecklistItemKind.CCR_URL):
        return RuleOutcome(
            "compatibility-certification",
            CCR_TITLE,
            CheckStatus.FAIL,
            ("No compatibility certification link provided",),
        )
    # The link exists but its content still needs a human.
    return RuleOutcome("compatibility-certification", CCR_TITLE, CheckStatus.REVIEW)


def _record_value(records: Sequence[ChecklistRecord], kind: ChecklistItemKind) -> str:
    record = find_record(records, kind)
    return record.value.strip() if record else ""


def _probe_link(url: str, probe: LinkProbe) -> str | None:
    """Return a failure detail for ``url``, or ``None`` when it serves content."""
    try:
        length = probe(url)
    except Exception as exc:  # any probe failure is reported, never raised
        logger.warning("link probe failed for %s: %s", redact(url), redact(str(exc)))
        return f"Failed to access URL: {url}"
    if length > 0:
        return None
    return f"Content length was zero for: {url}"
