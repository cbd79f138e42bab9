from __future__ import annotations

from typing import Tuple

from .matcher import NOT_FOUND, Pattern, locate, locate_last


def replace(buffer: str, pattern: Pattern, content: str) -> Tuple[str, bool]:
    span = locate(buffer, pattern)
    if span is NOT_FOUND:
        return buffer, False
    return f"{buffer[:span.start]}{content}{buffer[span.end:]}", True


def insert_before(buffer: str, pattern: Pattern, content: str) -> Tuple[str, bool]:
    span = locate(buffer, pattern)
    if span is NOT_FOUND:
        return buffer, False
    return f"{buffer[:span.start]}{content}{buffer[span.start:]}", True


def insert_before_last(buffer: str, pattern: Pattern, content: str) -> Tuple[str, bool]:
    # last closing brace is the proxy for "end of class body"
    span = locate_last(buffer, pattern)
    if span is NOT_FOUND:
        return buffer, False
    return f"{buffer[:span.start]}{content}{buffer[span.start:]}", True
