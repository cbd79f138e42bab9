"""
Boundary to the native splash screen module.

The native side exposes ``prevent_auto_hide_async`` and ``hide_async``
coroutines. When a capability is missing (the native module is not linked)
the call fails with UnavailabilityError instead of an AttributeError.
"""

import platform
from typing import Any

MODULE_NAME = "expo-splash-screen"


class UnavailabilityError(RuntimeError):
    def __init__(self, module_name: str, property_name: str):
        self.module_name = module_name
        self.property_name = property_name
        super().__init__(
            f"The method or property {module_name}.{property_name} is not available on {platform.system()}, "
            "are you sure you've linked all the native dependencies properly?"
        )


class SplashScreen:
    def __init__(self, native_module: Any):
        self.native_module = native_module

    async def prevent_auto_hide_async(self) -> Any:
        """
        Keep the native splash screen visible until ``hide_async`` is called.
        Has to be called before any view is created.
        """
        method = getattr(self.native_module, "prevent_auto_hide_async", None)
        if method is None:
            raise UnavailabilityError(MODULE_NAME, "preventAutoHideAsync")
        return await method()

    async def hide_async(self) -> Any:
        method = getattr(self.native_module, "hide_async", None)
        if method is None:
            raise UnavailabilityError(MODULE_NAME, "hideAsync")
        return await method()
