"""
Locating the Android parts of a React Native project.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from .constants import ANDROID_MAIN_PATH

PROJECT_ROOT_ENV = "SPLASHPATCH_PROJECT_ROOT"

IGNORE_DIRS = {
    ".git",
    ".gradle",
    ".idea",
    "build",
    "node_modules",
    "__pycache__",
}

MAIN_APPLICATION_FILES = ("MainApplication.java", "MainApplication.kt")


def get_project_root() -> Path:
    """
    Project root taken from ``SPLASHPATCH_PROJECT_ROOT``, defaulting to the
    current working directory.
    """
    return Path(os.environ.get(PROJECT_ROOT_ENV, ".")).resolve()


def android_main_path(project_root: str | Path) -> Path:
    return Path(project_root).resolve().joinpath(*ANDROID_MAIN_PATH)


def find_main_application(android_main: str | Path) -> Optional[Path]:
    """
    Find the MainApplication source under ``<android main>/java``.

    Java is preferred over Kotlin; within one language the first path in
    sorted order wins.
    """
    java_root = Path(android_main) / "java"
    if not java_root.is_dir():
        return None

    found = {name: [] for name in MAIN_APPLICATION_FILES}
    for dirpath, dirnames, filenames in os.walk(java_root):
        dirnames[:] = [d for d in dirnames if d not in IGNORE_DIRS]
        for filename in filenames:
            if filename in found:
                found[filename].append(Path(dirpath) / filename)

    for name in MAIN_APPLICATION_FILES:
        if found[name]:
            return sorted(found[name])[0]
    return None


def resolve_main_activity(main_application: str | Path) -> Optional[Tuple[Path, str]]:
    """
    MainActivity living next to ``main_application`` and its language.

    Returns ``None`` when neither ``MainActivity.java`` nor
    ``MainActivity.kt`` exists.
    """
    directory = Path(main_application).parent
    java = directory / "MainActivity.java"
    if java.exists():
        return java, "java"
    kotlin = directory / "MainActivity.kt"
    if kotlin.exists():
        return kotlin, "kotlin"
    return None
