"""
Android splash screen configuration: drawables, resources, manifest and
MainActivity wiring.
"""

from .configure import configure_android_splash_screen

__all__ = ["configure_android_splash_screen"]
