"""
Validated, immutable configuration consumed by the patching engine.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .colors import normalize_color
from .constants import Mode, Platform


class ConfigurationError(ValueError):
    """Raised when the user supplied configuration cannot be used."""


@dataclass(frozen=True)
class Configuration:
    background_color: str
    mode: Mode = Mode.CONTAIN
    platform: Platform = Platform.ALL
    image_path: Optional[Path] = None


def validate_configuration(
    background_color: str,
    image_path: Optional[str | Path] = None,
    mode: str | Mode = Mode.CONTAIN,
    platform: str | Platform = Platform.ALL,
) -> Configuration:
    """
    Build a Configuration, ensuring that:

    - ``mode`` and ``platform`` are known values,
    - native mode is only selected for the Android platform,
    - ``image_path`` (when given) points to an existing ``.png`` file,
    - ``background_color`` is a valid CSS color; it is normalized to hex.

    Raises:
        ConfigurationError: on the first violated requirement
    """
    try:
        mode = Mode(mode)
    except ValueError:
        raise ConfigurationError(
            f"Unknown value {mode} for option mode. Available values: {', '.join(m.value for m in Mode)}."
        ) from None
    try:
        platform = Platform(platform)
    except ValueError:
        raise ConfigurationError(
            f"Unknown value {platform} for option platform. Available values: {', '.join(p.value for p in Platform)}."
        ) from None

    if mode == Mode.NATIVE and platform != Platform.ANDROID:
        raise ConfigurationError(
            f"Invalid platform {platform.value} selected for mode {mode.value}. "
            f"Mode {mode.value} is only available for platform {Platform.ANDROID.value}."
        )

    resolved_image: Optional[Path] = None
    if image_path:
        resolved_image = Path(image_path).resolve()
        if not resolved_image.exists():
            raise ConfigurationError(f"No such file {image_path}. Provide path to a valid .png file.")
        if resolved_image.suffix != ".png":
            raise ConfigurationError(f"Provided {image_path} file is not a .png file. Provide path to a valid .png file.")

    normalized = normalize_color(background_color)
    if normalized is None:
        raise ConfigurationError(f"Provided invalid argument {background_color} as backgroundColor.")

    return Configuration(
        background_color=normalized,
        mode=mode,
        platform=platform,
        image_path=resolved_image,
    )
