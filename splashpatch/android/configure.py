from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from ..config import Configuration
from ..patcher import SplashScreenReport
from ..project import android_main_path
from .activity import configure_showing_splash_screen
from .drawables import configure_splash_screen_drawables
from .manifest import configure_android_manifest_xml
from .resources import configure_colors_xml, configure_drawable_xml, configure_styles_xml

logger = logging.getLogger(__name__)


async def configure_android_splash_screen(config: Configuration, project_root: str | Path) -> SplashScreenReport:
    """
    Configure the Android side of the splash screen.

    Drawable bitmaps are handled first since the drawable list refers to
    them. The remaining files are independent and patched concurrently; the
    first failure propagates and fails the whole run.
    """
    android_main = android_main_path(project_root)
    res = android_main / "res"
    report = SplashScreenReport()

    logger.info(f"Configuring Android splash screen in {android_main}")
    report.removed, report.copied = await asyncio.to_thread(
        configure_splash_screen_drawables, res, config.image_path
    )

    colors, drawable, styles, manifest, activity = await asyncio.gather(
        asyncio.to_thread(configure_colors_xml, res, config.background_color),
        asyncio.to_thread(configure_drawable_xml, res, config.mode),
        asyncio.to_thread(configure_styles_xml, res),
        asyncio.to_thread(configure_android_manifest_xml, android_main),
        asyncio.to_thread(configure_showing_splash_screen, project_root, config.mode),
    )
    report.results.extend([colors, drawable, styles])
    report.results.extend(manifest)
    report.results.extend(activity)
    report.warnings.extend(r.warning for r in report.results if r.warning)
    return report
