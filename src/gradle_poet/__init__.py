"""gradle-poet: Render Android module blueprints into build.gradle scripts."""

from gradle_poet.config import __version__
from gradle_poet.generators.gradle import AndroidModuleBuildGradleGenerator, generate_build_gradle
from gradle_poet.logging_config import get_logger
from gradle_poet.models.blueprint import AndroidBuildGradleBlueprint

__all__ = [
    "__version__",
    "AndroidBuildGradleBlueprint",
    "AndroidModuleBuildGradleGenerator",
    "generate_build_gradle",
    "get_logger",
]
