from __future__ import annotations

from collections.abc import Callable, Mapping

import pytest

from specreview.models import ChecklistItemKind

STAGING_URL = (
    "https://jakarta.oss.sonatype.org/content/repositories/staging/"
    "jakarta/foo/jakarta.foo-api/1.0.0/"
)
TCK_URL = "http://download.eclipse.org/ee4j/foo/jakartaee10/staged/eftl/jakarta-foo-tck-1.0.0.zip"
CCR_URL = "https://github.com/eclipse-ee4j/foo/issues/42"

LABELS: dict[ChecklistItemKind, str] = {
    ChecklistItemKind.SPEC_DIR: "Spec PR: directory of form {spec}/x.y",
    ChecklistItemKind.SPEC_PDF: "Spec PR: PDF of form jakarta-{spec}-spec-x.y.pdf",
    ChecklistItemKind.SPEC_HTML: "Spec PR: HTML of form jakarta-{spec}-spec-x.y.html",
    ChecklistItemKind.SPEC_INDEX: "Spec PR: index page {spec}/x.y/_index.md",
    ChecklistItemKind.SPEC_TCK_PR: "TCK PR opened",
    ChecklistItemKind.SPEC_TCK_RR: "TCK release review",
    ChecklistItemKind.RR_UPDATED: "Release record updated",
    ChecklistItemKind.RR_GEN_IP_LOG: "IP log generated",
    ChecklistItemKind.RR_EMAIL_PMC: "PMC approval email sent",
    ChecklistItemKind.RR_START_REVIEW: "Release review started",
    ChecklistItemKind.API_STAGE_REPO: "Staging repository link",
    ChecklistItemKind.TCK_STAGE_URL: "EFTL TCK link",
    ChecklistItemKind.CCR_URL: "Compatibility certification link",
    ChecklistItemKind.JAVADOC_DIR: "(Optional) Second PR for just apidocs",
}

DEFAULT_VALUES: dict[ChecklistItemKind, str] = {
    ChecklistItemKind.API_STAGE_REPO: STAGING_URL,
    ChecklistItemKind.TCK_STAGE_URL: TCK_URL,
    ChecklistItemKind.CCR_URL: CCR_URL,
}

BodyBuilder = Callable[..., str]


def build_body(
    values: Mapping[ChecklistItemKind, str] | None = None,
    *,
    count: int = 14,
    checked: frozenset[ChecklistItemKind] = frozenset(),
) -> str:
    """Build a PR body following the spec PR template with ``count`` checkboxes."""
    values = DEFAULT_VALUES if values is None else values
    lines = [
        "When creating a specification project release review, create PRs with the content",
        "defined as follows.",
        "",
    ]
    for kind in ChecklistItemKind.template_items()[:count]:
        mark = "x" if kind in checked else " "
        lines.append(f"- [{mark}] {LABELS[kind]}")
        if values.get(kind):
            lines.append(values[kind])
        lines.append("")
    return "\n".join(lines)


@pytest.fixture
def body_builder() -> BodyBuilder:
    return build_body
