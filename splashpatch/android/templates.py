"""
PatchSpec builders for the Android XML resources and the manifest.
"""

import re

from ..constants import (
    Mode,
    SPLASH_SCREEN_THEME,
    XML_ANDROID_MANIFEST,
    XML_LINE,
    XML_TOP,
    XML_TOP_NO_MANUAL_MODIFY,
)
from ..patcher import PatchSpec, Scoped

# <resources> ... </resources>
RESOURCES_CLOSING_TAG = re.compile(r"^(.*?)</resources>(.*?)$", re.M)
RESOURCES_BODY = re.compile(r"^[^\n]*<resources>[^\n]*\n(?P<at>.*?)^[^\n]*</resources>", re.M | re.S)

# colors_splashscreen.xml
SPLASH_BACKGROUND_COLOR_LINE = re.compile(r'^.*<color name="splashscreen_background">.*</color>.*\n', re.M)

# styles_splashscreen.xml
SPLASH_SCREEN_STYLE_BODY = re.compile(
    r'^[^\n]*<style name="Theme\.App\.SplashScreen" parent="[^"\n]*">[^\n]*\n(?P<at>.*?)^[^\n]*</style>',
    re.M | re.S,
)
WINDOW_BACKGROUND_LINE = re.compile(r'^.*<item name="android:windowBackground">.*</item>.*\n', re.M)

# AndroidManifest.xml
_MAIN_ACTIVITY_NAME = r'android:name="\.MainActivity"'
MAIN_ACTIVITY_TAG = re.compile(
    r"<application\b.*?(?P<at><activity(?=\s)[^>]*?" + _MAIN_ACTIVITY_NAME + r"[^>]*>)",
    re.S,
)
ACTIVITY_THEME_ATTRIBUTE = re.compile(r'android:theme="[^"]*"')
MAIN_ACTIVITY_ATTRIBUTES = re.compile(
    r"<application\b.*?<activity(?P<at>)(?=\s[^>]*?" + _MAIN_ACTIVITY_NAME + r")",
    re.S,
)
MANIFEST_COMMENT = re.compile(
    r"<application\b.*?(?P<at>[\n\t ]*"
    + re.escape(XML_ANDROID_MANIFEST)
    + r"[\n\t ]*?\n)(?=[^\n]*<activity(?=\s)[^>]*?"
    + _MAIN_ACTIVITY_NAME
    + r")",
    re.S,
)
MAIN_ACTIVITY_LINE = re.compile(
    r"<application\b.*?\n(?P<at>)[^\n]*<activity(?=\s)[^>]*?" + _MAIN_ACTIVITY_NAME,
    re.S,
)


def _color_line(background_color: str) -> str:
    return f'  <color name="splashscreen_background">{background_color}</color> {XML_LINE}\n'


def colors_xml(background_color: str) -> PatchSpec:
    return PatchSpec(
        file_content=f"{XML_TOP}\n<resources>\n{_color_line(background_color)}</resources>\n",
        replace_content=_color_line(background_color),
        replace_pattern=Scoped(RESOURCES_BODY, SPLASH_BACKGROUND_COLOR_LINE),
        insert_content=_color_line(background_color),
        insert_pattern=RESOURCES_CLOSING_TAG,
    )


def drawable_xml(mode: Mode) -> str:
    native_splash_screen = ""
    if mode == Mode.NATIVE:
        native_splash_screen = (
            "\n\n"
            "  <item>\n"
            "    <bitmap\n"
            '      android:gravity="center"\n'
            '      android:src="@drawable/splashscreen_image"\n'
            "    />\n"
            "  </item>"
        )
    return (
        f"{XML_TOP_NO_MANUAL_MODIFY}\n"
        '<layer-list xmlns:android="http://schemas.android.com/apk/res/android">\n'
        f'  <item android:drawable="@color/splashscreen_background"/>{native_splash_screen}\n'
        "</layer-list>\n"
    )


_WINDOW_BACKGROUND = f'    <item name="android:windowBackground">@drawable/splashscreen</item>  {XML_LINE}\n'


def styles_xml() -> PatchSpec:
    return PatchSpec(
        file_content=(
            f"{XML_TOP}\n"
            "<resources>\n"
            f'  <style name="{SPLASH_SCREEN_THEME}" parent="Theme.AppCompat.Light.NoActionBar"> {XML_LINE}\n'
            f"{_WINDOW_BACKGROUND}"
            '    <item name="android:windowDrawsSystemBarBackgrounds">true</item>'
            " <!-- Tells the system that the app would take care of drawing background for StatusBar -->\n"
            '    <item name="android:statusBarColor">@android:color/transparent</item>'
            " <!-- Make StatusBar transparent by default -->\n"
            "  </style>\n"
            "</resources>\n"
        ),
        replace_content=_WINDOW_BACKGROUND,
        replace_pattern=Scoped(SPLASH_SCREEN_STYLE_BODY, WINDOW_BACKGROUND_LINE),
        insert_content=(
            f'  <style name="{SPLASH_SCREEN_THEME}" parent="Theme.AppCompat.Light.NoActionBar">  {XML_LINE}\n'
            f"{_WINDOW_BACKGROUND}"
            "  </style>\n"
        ),
        insert_pattern=RESOURCES_CLOSING_TAG,
    )


def manifest_activity_theme() -> PatchSpec:
    theme = f'android:theme="@style/{SPLASH_SCREEN_THEME}"'
    return PatchSpec(
        replace_content=theme,
        replace_pattern=Scoped(MAIN_ACTIVITY_TAG, ACTIVITY_THEME_ATTRIBUTE),
        insert_content=f"\n      {theme}",
        insert_pattern=MAIN_ACTIVITY_ATTRIBUTES,
    )


def manifest_comment() -> PatchSpec:
    return PatchSpec(
        replace_content=f"\n\n    {XML_ANDROID_MANIFEST}\n",
        replace_pattern=MANIFEST_COMMENT,
        insert_content=f"\n    {XML_ANDROID_MANIFEST}\n",
        insert_pattern=MAIN_ACTIVITY_LINE,
    )
