"""Classify the files changed by a specification PR.

Paths fall into exactly one bucket: generated API docs (anything under an
``apidocs`` directory), specification artifacts (``{spec}/{version}/...``)
or other files, which a specification PR should not contain.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .models import UNKNOWN, FileClassification

__all__ = [
    "JAVADOC_MARKER",
    "SPEC_PATH_PATTERN",
    "classify_files",
]

logger = logging.getLogger(__name__)

JAVADOC_MARKER = "apidocs"
SPEC_PATH_PATTERN = re.compile(r".*/[0-9]+(?:\.[0-9]+)*/.*")


def classify_files(paths: Iterable[str]) -> FileClassification:
    spec_files: list[str] = []
    javadoc_files: list[str] = []
    other_files: list[str] = []
    spec_pdf: str | None = None
    spec_html: str | None = None

    for path in paths:
        if path.find(JAVADOC_MARKER) > 0:
            javadoc_files.append(path)
        elif SPEC_PATH_PATTERN.fullmatch(path):
            spec_files.append(path)
            filename = path.rsplit("/", 1)[-1]
            if filename.endswith(".pdf"):
                spec_pdf = filename
            elif filename.endswith(".html"):
                spec_html = filename
        else:
            other_files.append(path)

    spec_name = spec_version = UNKNOWN
    if spec_files:
        # e.g. coreprofile/10/jakarta-coreprofile-spec-10.html
        segments = spec_files[0].split("/")
        spec_name, spec_version = segments[0], segments[1]
    else:
        logger.warning("no specification files found")

    logger.debug(
        "classified %d spec, %d javadoc, %d other files",
        len(spec_files),
        len(javadoc_files),
        len(other_files),
    )
    return FileClassification(
        spec_files=tuple(spec_files),
        javadoc_files=tuple(javadoc_files),
        other_files=tuple(other_files),
        spec_name=spec_name,
        spec_version=spec_version,
        spec_pdf=spec_pdf,
        spec_html=spec_html,
    )
