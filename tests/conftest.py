"""Pytest configuration and fixtures for gradle-poet tests."""

import logging
from pathlib import Path

import pytest

from gradle_poet.models.blueprint import AndroidBuildGradleBlueprint


@pytest.fixture(autouse=True)
def reset_logging():
    """Reset logging configuration after each test.

    This ensures that tests which call setup_logging() don't affect
    other tests that rely on caplog fixture for log capture.
    """
    yield

    logger = logging.getLogger("gradle_poet")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def app_blueprint() -> AndroidBuildGradleBlueprint:
    """Minimal application module blueprint with nothing optional set."""
    return AndroidBuildGradleBlueprint(
        path=Path("app/build.gradle"),
        package_name="com.example.app",
        compile_sdk_version=28,
        min_sdk_version=21,
        target_sdk_version=28,
        is_application=True,
        plugins=("com.android.application",),
    )


@pytest.fixture
def blueprint_toml(tmp_path) -> Path:
    """Blueprint file declaring an application and a library module."""
    path = tmp_path / "blueprints.toml"
    path.write_text(
        """
[[modules]]
path = "app/build.gradle"
package_name = "com.example.app"
compile_sdk_version = 28
min_sdk_version = 21
target_sdk_version = 28
is_application = true
plugins = ["com.android.application"]
enable_data_binding = true
flavor_dimensions = ["tier"]

[[modules.product_flavors]]
name = "free"
dimension = "tier"

[[modules.dependencies]]
method = "implementation"
name = "core"

[[modules.libraries]]
method = "implementation"
name = "com.google.code.gson:gson:2.8.5"

[[modules]]
module_root = "core"
package_name = "com.example.core"
compile_sdk_version = 28
min_sdk_version = 21
target_sdk_version = 28
plugins = ["com.android.library"]
""",
        encoding="utf-8",
    )
    return path
