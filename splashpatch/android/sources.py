"""
PatchSpec builders for MainActivity sources.

Java and Kotlin share the same patch sequence; they differ in statement
terminators, class declaration syntax and the body of the generated code.
"""

import re
from abc import ABC, abstractmethod
from typing import Optional

from ..constants import JAVA_KOTLIN_LINE, SPLASH_SCREEN_PACKAGE, Mode
from ..patcher import PatchSpec

HELPER_METHOD = "allowDrawingBeneathStatusBar"

# last line holding only a closing brace, the end of the class body
CLOSING_BRACE_LINE = re.compile(r"^\s*}\s*$", re.M)

_PACKAGE = re.escape(SPLASH_SCREEN_PACKAGE)


class ActivitySource(ABC):
    """MainActivity patches for one source language."""

    language = ""
    terminator = ""
    class_declaration = ""
    helper_definition = ""

    def _show_call(self, mode: Mode) -> str:
        return f"SplashScreen.show(this, SplashScreenMode.{mode.value.upper()}){self.terminator} {JAVA_KOTLIN_LINE}"

    def _show_call_regex(self) -> str:
        return r"SplashScreen\.show\(this, SplashScreenMode\..*\)" + re.escape(self.terminator)

    def _imports(self) -> str:
        t = self.terminator
        return f"import {SPLASH_SCREEN_PACKAGE}.SplashScreen{t}\nimport {SPLASH_SCREEN_PACKAGE}.SplashScreenMode{t}"

    def imports(self) -> PatchSpec:
        t = re.escape(self.terminator)
        return PatchSpec(
            replace_content=self._imports(),
            replace_pattern=re.compile(
                rf"^import {_PACKAGE}\.SplashScreen{t}.*?\nimport {_PACKAGE}\.SplashScreenMode{t}.*?$",
                re.M,
            ),
            insert_content=f"{self._imports()}\n\n",
            insert_pattern=re.compile(rf"{self.class_declaration}.*$", re.M),
        )

    def show_call(self, mode: Mode) -> PatchSpec:
        # super.onCreate has to be called first
        return PatchSpec(
            replace_content=self._show_call(mode),
            replace_pattern=re.compile(
                r"super\.onCreate(?:.|\n)*?(?P<at>" + self._show_call_regex() + r".*$)",
                re.M,
            ),
            insert_content=(
                "\n    // SplashScreen.show(...) has to called after super.onCreate(...)"
                f"\n    {self._show_call(mode)}"
            ),
            insert_pattern=re.compile(r"^.*super\.onCreate.*(?P<at>)$", re.M),
        )

    @abstractmethod
    def on_create(self, mode: Mode) -> PatchSpec:
        """onCreate override that shows the splash screen."""

    def bundle_import(self) -> PatchSpec:
        t = self.terminator
        return PatchSpec(
            replace_content=f"import android.os.Bundle{t}",
            replace_pattern=re.compile(r"import android\.os\.Bundle" + re.escape(t), re.M),
            insert_content=f"\n\nimport android.os.Bundle{t}",
            insert_pattern=re.compile(r"^.*?package .*?(?P<at>)$", re.M),
        )

    def insets_import(self) -> Optional[PatchSpec]:
        return None

    def helper_call(self) -> PatchSpec:
        return PatchSpec(
            insert_content=(
                "\n    // StatusBar transparency & translucency that would work with RN has to be pragmatically configured."
                f"\n    this.{HELPER_METHOD}(){self.terminator}"
            ),
            insert_pattern=re.compile(self._show_call_regex() + r".*(?P<at>)$", re.M),
        )

    @abstractmethod
    def helper_method(self) -> PatchSpec:
        """Status bar helper appended as the last method of the class."""


class JavaActivitySource(ActivitySource):
    language = "java"
    terminator = ";"
    class_declaration = r"public class .* extends .* \{"
    helper_definition = f"private void {HELPER_METHOD}()"

    def on_create(self, mode: Mode) -> PatchSpec:
        return PatchSpec(
            insert_content=(
                "\n\n"
                "  @Override\n"
                "  protected void onCreate(Bundle savedInstanceState) {\n"
                "    super.onCreate(savedInstanceState);\n"
                "    // SplashScreen.show(...) has to called after super.onCreate(...)\n"
                f"    {self._show_call(mode)}\n"
                "  }\n"
            ),
            insert_pattern=re.compile(rf"{self.class_declaration}.*(?P<at>)$", re.M),
        )

    def insets_import(self) -> Optional[PatchSpec]:
        return PatchSpec(
            insert_content="\nimport android.view.WindowInsets;",
            insert_pattern=re.compile(r"^.*?import\s*android\.os\.Bundle;.*?(?P<at>)$", re.M),
        )

    def helper_method(self) -> PatchSpec:
        return PatchSpec(
            insert_content=(
                "\n"
                f"  {self.helper_definition} {{\n"
                "    // Hook into the window insets calculations and consume all the top insets so no padding will be added under the status bar.\n"
                "    // This approach goes in pair with ReactNative's StatusBar module's approach.\n"
                "    getWindow().getDecorView().setOnApplyWindowInsetsListener(\n"
                "        (v, insets) -> {\n"
                "          WindowInsets defaultInsets = v.onApplyWindowInsets(insets);\n"
                "          return defaultInsets.replaceSystemWindowInsets(\n"
                "              defaultInsets.getSystemWindowInsetLeft(),\n"
                "              0,\n"
                "              defaultInsets.getSystemWindowInsetRight(),\n"
                "              defaultInsets.getSystemWindowInsetBottom());\n"
                "        });\n"
                "  }\n"
            ),
            insert_pattern=CLOSING_BRACE_LINE,
        )


class KotlinActivitySource(ActivitySource):
    language = "kotlin"
    terminator = ""
    class_declaration = r"class .* : .* \{"
    helper_definition = f"private fun {HELPER_METHOD}()"

    def on_create(self, mode: Mode) -> PatchSpec:
        return PatchSpec(
            insert_content=(
                "\n\n"
                "  override fun onCreate(savedInstanceState: Bundle?) {\n"
                "    super.onCreate(savedInstanceState)\n"
                "    // SplashScreen.show(...) has to called after super.onCreate(...)\n"
                f"    {self._show_call(mode)}\n"
                "  }\n"
            ),
            insert_pattern=re.compile(rf"{self.class_declaration}.*(?P<at>)$", re.M),
        )

    def helper_method(self) -> PatchSpec:
        return PatchSpec(
            insert_content=(
                "\n"
                f"  {self.helper_definition} {{\n"
                "    // Hook into the window insets calculations and consume all the top insets so no padding will be added under the status bar.\n"
                "    // This approach goes in pair with ReactNative's StatusBar module's approach.\n"
                "    window.decorView.setOnApplyWindowInsetsListener { v, insets ->\n"
                "      v.onApplyWindowInsets(insets).let {\n"
                "        it.replaceSystemWindowInsets(\n"
                "          it.systemWindowInsetLeft,\n"
                "          0,\n"
                "          it.systemWindowInsetRight,\n"
                "          it.systemWindowInsetBottom\n"
                "        )\n"
                "      }\n"
                "    }\n"
                "  }\n"
            ),
            insert_pattern=CLOSING_BRACE_LINE,
        )


JAVA = JavaActivitySource()
KOTLIN = KotlinActivitySource()
