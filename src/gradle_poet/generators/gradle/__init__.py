"""Gradle build script generators."""

from gradle_poet.generators.gradle.build_gradle import build_statements, generate_build_gradle
from gradle_poet.generators.gradle.generator import AndroidModuleBuildGradleGenerator

__all__ = ["AndroidModuleBuildGradleGenerator", "build_statements", "generate_build_gradle"]
