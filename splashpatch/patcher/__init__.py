"""
Idempotent text patching: pattern matching, buffer mutation and the
per-file create/replace/insert policy.
"""

from .matcher import NOT_FOUND, Scoped, Span, locate, locate_last, pattern_text, regex_literal
from .mutator import insert_before, insert_before_last, replace
from .patcher import (
    insert_in_file,
    insert_in_file_before_last,
    replace_in_file,
    replace_or_insert_in_file,
    write_or_replace_or_insert_in_file,
)
from .report import PatchResult, PatchSpec, SplashScreenReport

__all__ = [
    "NOT_FOUND",
    "Scoped",
    "Span",
    "locate",
    "locate_last",
    "pattern_text",
    "regex_literal",
    "replace",
    "insert_before",
    "insert_before_last",
    "insert_in_file",
    "insert_in_file_before_last",
    "replace_in_file",
    "replace_or_insert_in_file",
    "write_or_replace_or_insert_in_file",
    "PatchResult",
    "PatchSpec",
    "SplashScreenReport",
]
