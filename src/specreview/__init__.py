__version__ = "0.1.0"

__all__ = [
    "ChecklistItemKind",
    "ChecklistRecord",
    "CheckStatus",
    "FileClassification",
    "MalformedChecklistError",
    "RuleOutcome",
    "classify_files",
    "evaluate_rules",
    "parse_checklist",
    "render_report",
]

from .errors import MalformedChecklistError
from .files import classify_files
from .models import ChecklistItemKind, ChecklistRecord, CheckStatus, FileClassification, RuleOutcome
from .parser import parse_checklist
from .report import render_report
from .rules import evaluate_rules
