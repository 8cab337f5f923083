from __future__ import annotations

import re

# Hide token-shaped values while keeping the surrounding message readable.
_SECRET_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"(?i)(api[_-]?key|token|secret|password)\s*[:=]\s*([^\s,;&]+)"),
    re.compile(r"(?i)\b(bearer|token)\s+([a-z0-9\-\._~\+\/]+=*)"),
]

_GITHUB_TOKEN_RE = re.compile(
    r"\b(?:ghp|gho|ghu|ghs|ghr)_[A-Za-z0-9]{20,}\b|\bgithub_pat_[A-Za-z0-9_]{20,}"
)


def redact(text: str) -> str:
    """Redact likely secrets from a string (best-effort, non-destructive)."""
    redacted = _GITHUB_TOKEN_RE.sub("[REDACTED]", text)
    for pat in _SECRET_PATTERNS:
        redacted = pat.sub(lambda m: f"{m.group(1)} [REDACTED]", redacted)
    return redacted
