from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Tuple

from ..constants import DRAWABLES_CONFIGS, SPLASH_SCREEN_DRAWABLE
from ..patcher.files import copy_file, remove_file

logger = logging.getLogger(__name__)


def configure_splash_screen_drawables(
    android_main_res_path: str | Path,
    splash_screen_image_path: Optional[str | Path] = None,
) -> Tuple[List[str], Optional[str]]:
    """
    Delete every previous splash screen image and copy the new one.

    Old images are removed from all density directories, but the new image
    is only placed in the base ``drawable`` directory. Without an image path
    no new image is placed at all.

    Returns the removed paths and the copied path (if any).
    """
    res = Path(android_main_res_path)
    removed: List[str] = []
    for directory in DRAWABLES_CONFIGS:
        drawable_path = res / directory / SPLASH_SCREEN_DRAWABLE
        if remove_file(drawable_path):
            removed.append(str(drawable_path))
            logger.debug(f"Removed {drawable_path}")

    if not splash_screen_image_path:
        return removed, None

    destination = copy_file(splash_screen_image_path, res / "drawable" / SPLASH_SCREEN_DRAWABLE)
    logger.info(f"Copied {splash_screen_image_path} to {destination}")
    return removed, str(destination)
