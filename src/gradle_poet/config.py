"""Configuration constants for gradle-poet."""

from pathlib import Path

# Version
__version__ = "0.1.0"

# Output
BUILD_GRADLE_FILE_NAME = "build.gradle"
"""File name appended to a blueprint's module_root when no explicit path is given"""

DEFAULT_OUTPUT_DIR = Path(".")
"""Root that relative blueprint paths are resolved against"""

INDENT = "    "
"""One indent unit per nesting level in generated scripts"""

# defaultConfig values
VERSION_CODE = "1"
VERSION_NAME = '"1.0"'
TEST_INSTRUMENTATION_RUNNER = '"android.support.test.runner.AndroidJUnitRunner"'

# compileOptions
JAVA_COMPATIBILITY = "1.8"
"""Value for both targetCompatibility and sourceCompatibility"""

# buildTypes.release
PROGUARD_FILES = "getDefaultProguardFile('proguard-android.txt'), 'proguard-rules.pro'"

# dependencies
LIBS_FILE_TREE = "fileTree(dir: 'libs', include: ['*.jar'])"
"""Local jar dependencies always declared first in the dependencies block"""
