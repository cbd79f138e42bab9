from __future__ import annotations

import logging
from pathlib import Path

from .files import is_blank, path_exists, read_text, write_text
from .matcher import pattern_text
from .mutator import insert_before, insert_before_last, replace
from .report import PatchResult, PatchSpec

logger = logging.getLogger(__name__)


def replace_in_file(path: str | Path, spec: PatchSpec) -> bool:
    """Replace the first ``replace_pattern`` match; ``True`` if it matched."""
    content = read_text(path)
    new, replaced = replace(content, spec.replace_pattern, spec.replace_content)
    if replaced:
        write_text(path, new)
    return replaced


def insert_in_file(path: str | Path, spec: PatchSpec) -> bool:
    """Insert ``insert_content`` before the first ``insert_pattern`` match."""
    content = read_text(path)
    new, inserted = insert_before(content, spec.insert_pattern, spec.insert_content)
    if inserted:
        write_text(path, new)
    return inserted


def insert_in_file_before_last(path: str | Path, spec: PatchSpec) -> bool:
    """Insert ``insert_content`` before the last ``insert_pattern`` match."""
    content = read_text(path)
    new, inserted = insert_before_last(content, spec.insert_pattern, spec.insert_content)
    if inserted:
        write_text(path, new)
    return inserted


def replace_or_insert_in_file(path: str | Path, spec: PatchSpec, target: str = "") -> PatchResult:
    """
    Modify an existing file if either pattern matches.

    ``replace_pattern`` takes precedence; ``insert_pattern`` is only tried
    when nothing was replaced.
    """
    replaced = replace_in_file(path, spec)
    inserted = not replaced and insert_in_file(path, spec)
    result = PatchResult(path=str(path), target=target, replaced=replaced, inserted=inserted)
    if result.applied:
        logger.info(f"{target or 'patch'} {result.operation} in {path}")
    else:
        logger.debug(f"{target or 'patch'}: no pattern matched in {path}")
    return result


def write_or_replace_or_insert_in_file(path: str | Path, spec: PatchSpec, target: str = "") -> PatchResult:
    """
    Apply the create/replace/insert/append policy to ``path``.

    - missing or blank file: write ``file_content``,
    - ``replace_pattern`` matches: replace it with ``replace_content``,
    - ``insert_pattern`` matches: insert ``insert_content`` before it,
    - otherwise append the literal ``insert_pattern`` text to the file.
    """
    if not path_exists(path) or is_blank(read_text(path)):
        write_text(path, spec.file_content)
        logger.info(f"{target or 'file'} created at {path}")
        return PatchResult(path=str(path), target=target, created=True)

    result = replace_or_insert_in_file(path, spec, target)
    if result.applied:
        return result

    # NOTE: appends the pattern itself, not insert_content
    original = read_text(path)
    write_text(path, f"{original}{pattern_text(spec.insert_pattern)}")
    warning = f"{target or 'patch'}: no anchor found in {path}, appended insert pattern to the end of file"
    logger.warning(warning)
    return PatchResult(path=str(path), target=target, inserted=True, warning=warning)
