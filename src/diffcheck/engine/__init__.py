"""Function-aware comparison engine."""

from diffcheck.engine._types import DiffMarker, DiffRow, DiffSequence, FunctionBlock, FunctionTable
from diffcheck.engine.comments import strip_comments
from diffcheck.engine.differ import classify_reorders, diff_lines
from diffcheck.engine.extractor import extract_functions
from diffcheck.engine.matcher import MatchedFunction, match_functions
from diffcheck.engine.normalize import normalize_body, normalize_line, to_lines
from diffcheck.engine.pipeline import run_comparison
from diffcheck.engine.summarizer import build_summary

__all__ = [
    "DiffMarker",
    "DiffRow",
    "DiffSequence",
    "FunctionBlock",
    "FunctionTable",
    "MatchedFunction",
    "build_summary",
    "classify_reorders",
    "diff_lines",
    "extract_functions",
    "match_functions",
    "normalize_body",
    "normalize_line",
    "run_comparison",
    "strip_comments",
    "to_lines",
]
