from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, Optional, Union

# Named group that narrows a regex match down to the span we care about.
# Text consumed outside the group acts as context (a lookbehind stand-in).
ANCHOR_GROUP = "at"

NOT_FOUND = None


@dataclass(frozen=True)
class Span:
    start: int
    end: int


@dataclass(frozen=True)
class Scoped:
    """
    Two-phase pattern: ``target`` is only searched inside the region
    matched by ``scope``.

    The region is the ``at`` group of the scope match when the scope regex
    defines one, otherwise the whole scope match. Offsets are always
    reported in the coordinates of the full buffer.
    """
    scope: "re.Pattern[str]"
    target: "re.Pattern[str]"


Pattern = Union[str, "re.Pattern[str]", Scoped]


def _anchor_span(match: "re.Match[str]") -> Span:
    if ANCHOR_GROUP in match.re.groupindex:
        return Span(*match.span(ANCHOR_GROUP))
    return Span(*match.span())


def iter_spans(buffer: str, pattern: Pattern) -> Iterator[Span]:
    """Yield every match of ``pattern`` in ``buffer``, in buffer order."""
    if isinstance(pattern, str):
        step = max(len(pattern), 1)
        start = buffer.find(pattern)
        while start != -1:
            yield Span(start, start + len(pattern))
            start = buffer.find(pattern, start + step)
    elif isinstance(pattern, Scoped):
        for scope_match in pattern.scope.finditer(buffer):
            region = _anchor_span(scope_match)
            # pos/endpos keep ^ and $ anchored to real line boundaries
            for match in pattern.target.finditer(buffer, region.start, region.end):
                yield _anchor_span(match)
    else:
        for match in pattern.finditer(buffer):
            yield _anchor_span(match)


def locate(buffer: str, pattern: Pattern) -> Optional[Span]:
    """First match of ``pattern`` or ``NOT_FOUND``."""
    return next(iter_spans(buffer, pattern), NOT_FOUND)


def locate_last(buffer: str, pattern: Pattern) -> Optional[Span]:
    """Last match of ``pattern`` across the whole buffer or ``NOT_FOUND``."""
    last = NOT_FOUND
    for span in iter_spans(buffer, pattern):
        last = span
    return last


# Regex literal flags, in the order a regex literal spells them.
_LITERAL_FLAGS = ((re.IGNORECASE, "i"), (re.MULTILINE, "m"), (re.DOTALL, "s"))
_UNESCAPED_SLASH = re.compile(r"(?<!\\)/")


def regex_literal(pattern: "re.Pattern[str]") -> str:
    """``/source/flags`` form of a compiled pattern, e.g. ``/^a<\\/b>$/m``."""
    source = _UNESCAPED_SLASH.sub(r"\\/", pattern.pattern)
    flags = "".join(letter for flag, letter in _LITERAL_FLAGS if pattern.flags & flag)
    return f"/{source}/{flags}"


def pattern_text(pattern: Pattern) -> str:
    """Text of a pattern as written into files by the append fallback."""
    if isinstance(pattern, str):
        return pattern
    if isinstance(pattern, Scoped):
        return regex_literal(pattern.target)
    return regex_literal(pattern)
