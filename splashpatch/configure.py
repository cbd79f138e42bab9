"""
Platform dispatch for a validated configuration.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path

from .android import configure_android_splash_screen
from .config import Configuration
from .constants import Platform
from .patcher import SplashScreenReport

logger = logging.getLogger(__name__)


async def configure_splash_screen(config: Configuration, project_root: str | Path) -> SplashScreenReport:
    if config.platform == Platform.IOS:
        warning = "iOS splash screen configuration is not supported; nothing to do."
        logger.warning(warning)
        return SplashScreenReport(warnings=[warning])

    report = await configure_android_splash_screen(config, project_root)
    if config.platform == Platform.ALL:
        warning = "iOS splash screen configuration is not supported; only Android was configured."
        logger.warning(warning)
        report.warnings.append(warning)
    return report


def run(config: Configuration, project_root: str | Path) -> SplashScreenReport:
    """Synchronous entry point used by the CLI."""
    return asyncio.run(configure_splash_screen(config, project_root))
