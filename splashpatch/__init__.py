"""
splashpatch - idempotent native splash screen configuration.

This package patches the Android resources, manifest and main activity of
an existing React Native project so that a native splash screen is shown
on startup. Every run can be repeated safely: previously generated
fragments are recognised and updated in place.
"""

__version__ = "0.1.0"
__author__ = "splashpatch contributors"
