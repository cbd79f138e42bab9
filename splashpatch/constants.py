"""
Enumerations, file names and the marker comments embedded in generated
files. Marker strings are matched by later runs and must not change.
"""

from enum import Enum


class Mode(str, Enum):
    NATIVE = "native"
    CONTAIN = "contain"


class Platform(str, Enum):
    ANDROID = "android"
    IOS = "ios"
    ALL = "all"


# Density-qualified drawable directories and their scale factors
# https://developer.android.com/training/multiscreen/screendensities
DRAWABLES_CONFIGS = {
    "drawable": {"multiplier": 1},
    "drawable-mdpi": {"multiplier": 1},
    "drawable-hdpi": {"multiplier": 1.5},
    "drawable-xhdpi": {"multiplier": 2},
    "drawable-xxhdpi": {"multiplier": 3},
    "drawable-xxxhdpi": {"multiplier": 4},
}

SPLASH_SCREEN_DRAWABLE = "splashscreen_image.png"
SPLASH_SCREEN_XML = "splashscreen.xml"
COLORS_XML = "colors_splashscreen.xml"
STYLES_XML = "styles_splashscreen.xml"
ANDROID_MANIFEST = "AndroidManifest.xml"

ANDROID_MAIN_PATH = ("android", "app", "src", "main")

SPLASH_SCREEN_THEME = "Theme.App.SplashScreen"

# Marker comments
JAVA_KOTLIN_LINE = "// THIS LINE IS HANDLED BY 'expo-splash-screen' COMMAND AND IT'S DISCOURAGED TO MODIFY IT MANUALLY"

XML_LINE = "<!-- THIS LINE IS HANDLED BY 'expo-splash-screen' COMMAND AND IT'S DISCOURAGED TO MODIFY IT MANUALLY -->"
XML_TOP = "<!--\n\n    THIS FILE IS CREATED BY 'expo-splash-screen' COMMAND AND IT'S FRAGMENTS ARE HANDLED BY IT\n\n-->"
XML_TOP_NO_MANUAL_MODIFY = (
    "<!--\n\n    THIS FILE IS CREATED BY 'expo-splash-screen' COMMAND AND IT'S DISCOURAGED TO MODIFY IT MANUALLY\n\n-->"
)
XML_ANDROID_MANIFEST = (
    "<!-- THIS ACTIVITY'S 'android:theme' ATTRIBUTE IS HANDLED BY 'expo-splash-screen' COMMAND "
    "AND IT'S DISCOURAGED TO MODIFY IT MANUALLY -->"
)

SPLASH_SCREEN_PACKAGE = "main.kotlin.expo.modules.splashscreen"
