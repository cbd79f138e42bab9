from __future__ import annotations

import logging
from pathlib import Path

from ..constants import COLORS_XML, SPLASH_SCREEN_XML, STYLES_XML, Mode
from ..patcher import PatchResult, write_or_replace_or_insert_in_file
from ..patcher.files import write_text
from . import templates

logger = logging.getLogger(__name__)


def configure_colors_xml(android_main_res_path: str | Path, background_color: str) -> PatchResult:
    path = Path(android_main_res_path) / "values" / COLORS_XML
    return write_or_replace_or_insert_in_file(path, templates.colors_xml(background_color), target="background color")


def configure_drawable_xml(android_main_res_path: str | Path, mode: Mode) -> PatchResult:
    # fully owned by us, rewritten on every run
    path = Path(android_main_res_path) / "drawable" / SPLASH_SCREEN_XML
    write_text(path, templates.drawable_xml(mode))
    logger.info(f"splash screen drawable written to {path}")
    return PatchResult(path=str(path), target="splash screen drawable", created=True)


def configure_styles_xml(android_main_res_path: str | Path) -> PatchResult:
    path = Path(android_main_res_path) / "values" / STYLES_XML
    return write_or_replace_or_insert_in_file(path, templates.styles_xml(), target="splash screen style")
