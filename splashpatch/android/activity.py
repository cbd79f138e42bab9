"""
Wiring ``SplashScreen.show(...)`` into MainActivity.

The activity is patched in a fixed order, each step reading the file left
by the previous one:

1. the SplashScreen imports,
2. the show call: replaced when already present, otherwise inserted right
   after ``super.onCreate(...)``, otherwise a whole ``onCreate`` override
   (plus the ``Bundle`` import) is added,
3. only when the show call was freshly inserted, the status bar helper:
   its import (Java), its call below the show call and its body as the last
   method of the class.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

from ..constants import Mode
from ..patcher import PatchResult, insert_in_file, insert_in_file_before_last, replace_or_insert_in_file
from ..patcher.files import read_text
from ..project import android_main_path, find_main_application, resolve_main_activity
from .sources import JAVA, KOTLIN, ActivitySource

logger = logging.getLogger(__name__)

SOURCES_BY_LANGUAGE = {JAVA.language: JAVA, KOTLIN.language: KOTLIN}


def configure_showing_splash_screen(project_root: str | Path, mode: Mode) -> List[PatchResult]:
    """
    Inject the code that triggers SplashScreen mounting into MainActivity.

    A project without MainApplication or MainActivity is reported and
    skipped; it does not abort the run.
    """
    main_application = find_main_application(android_main_path(project_root))
    if main_application is None:
        logger.error(f"Could not find MainApplication.java or MainApplication.kt in {project_root}; MainActivity is left untouched.")
        return []

    resolved = resolve_main_activity(main_application)
    if resolved is None:
        logger.error(f"Neither MainActivity.java nor MainActivity.kt found next to {main_application}.")
        return []

    path, language = resolved
    return patch_main_activity(path, SOURCES_BY_LANGUAGE[language], mode)


def patch_main_activity(path: str | Path, source: ActivitySource, mode: Mode) -> List[PatchResult]:
    results: List[PatchResult] = []

    results.append(replace_or_insert_in_file(path, source.imports(), target="SplashScreen imports"))

    show = replace_or_insert_in_file(path, source.show_call(mode), target="SplashScreen.show call")
    results.append(show)

    on_create_inserted = False
    if not show.applied:
        # no onCreate at all, add a basic one with its Bundle import
        on_create_inserted = insert_in_file(path, source.on_create(mode))
        results.append(PatchResult(path=str(path), target="onCreate override", inserted=on_create_inserted))
        results.append(replace_or_insert_in_file(path, source.bundle_import(), target="Bundle import"))
        if not on_create_inserted:
            logger.warning(f"No class declaration found in {path}; SplashScreen.show call was not added.")

    if show.inserted or on_create_inserted:
        results.extend(_allow_drawing_beneath_status_bar(path, source))
    return results


def _allow_drawing_beneath_status_bar(path: str | Path, source: ActivitySource) -> List[PatchResult]:
    if source.helper_definition in read_text(path):
        logger.debug(f"{source.helper_definition} already defined in {path}")
        return []

    results: List[PatchResult] = []
    insets_import = source.insets_import()
    if insets_import is not None:
        inserted = insert_in_file(path, insets_import)
        results.append(PatchResult(path=str(path), target="WindowInsets import", inserted=inserted))

    inserted = insert_in_file(path, source.helper_call())
    results.append(PatchResult(path=str(path), target="status bar helper call", inserted=inserted))

    inserted = insert_in_file_before_last(path, source.helper_method())
    results.append(PatchResult(path=str(path), target="status bar helper method", inserted=inserted))
    return results
