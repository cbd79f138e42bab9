from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..constants import ANDROID_MANIFEST
from ..patcher import PatchResult, replace_or_insert_in_file
from . import templates

logger = logging.getLogger(__name__)


def configure_android_manifest_xml(android_main_path: str | Path) -> List[PatchResult]:
    """
    Point MainActivity's ``android:theme`` at the splash screen theme and
    place the explanatory comment above the activity entry.

    The manifest must exist; a missing file is an I/O failure.
    """
    path = Path(android_main_path) / ANDROID_MANIFEST

    theme = replace_or_insert_in_file(path, templates.manifest_activity_theme(), target="MainActivity theme")
    comment = replace_or_insert_in_file(path, templates.manifest_comment(), target="MainActivity theme comment")

    if not theme.applied and not comment.applied:
        theme.warning = (
            f"{ANDROID_MANIFEST} does not contain <activity /> entry for MainActivity. "
            "SplashScreen style will not be applied."
        )
        logger.warning(theme.warning)
    return [theme, comment]
