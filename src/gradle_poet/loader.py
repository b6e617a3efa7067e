"""Load module blueprints from TOML files.

A blueprint file holds one ``[[modules]]`` table per Android module:

    [[modules]]
    path = "app/build.gradle"
    package_name = "com.example.app"
    compile_sdk_version = 28
    min_sdk_version = 21
    target_sdk_version = 28
    is_application = true
    plugins = ["com.android.application"]

    [[modules.product_flavors]]
    name = "free"
    dimension = "tier"

The location fields (path, module_root) may reference environment variables
($VAR, ${VAR:-default}); an unset variable without a default is an error.
Every other string is Groovy text and is kept verbatim, so ${...}
interpolation in build type bodies or extra lines reaches the script intact.
"""

from pathlib import Path

import tomlkit
from expandvars import ExpandvarsException
from tomlkit.exceptions import TOMLKitError

from gradle_poet.logging_config import get_logger
from gradle_poet.models.blueprint import AndroidBuildGradleBlueprint
from gradle_poet.utils import expandvars_dict

logger = get_logger(__name__)

EXPANDED_FIELDS = ("path", "module_root")
"""Blueprint fields that undergo environment variable expansion"""


class BlueprintLoadError(Exception):
    """Raised when a blueprint file cannot be read or mapped to blueprints."""


def _parse(path: Path) -> dict:
    if not path.exists():
        raise BlueprintLoadError(f"Blueprint file not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return tomlkit.load(f).unwrap()
    except (OSError, TOMLKitError) as e:
        raise BlueprintLoadError(f"Failed to parse blueprint file {path}: {e}") from e


def _expand_locations(module: dict) -> dict:
    locations = {key: module[key] for key in EXPANDED_FIELDS if key in module}
    return {**module, **expandvars_dict(locations, nounset=True)}


def load_blueprints(path: Path) -> list[AndroidBuildGradleBlueprint]:
    """Load every module blueprint declared in a TOML file.

    Args:
        path: Path to the blueprint file

    Returns:
        Blueprints in file order

    Raises:
        BlueprintLoadError: If the file is missing, is not valid TOML,
            a location references an unset variable, or a module lacks a
            required field
    """
    modules = _parse(path).get("modules", [])

    blueprints = []
    for index, module in enumerate(modules):
        try:
            module = _expand_locations(module)
        except ExpandvarsException as e:
            raise BlueprintLoadError(f"Module #{index} in {path}: failed to expand variables: {e}") from e

        try:
            blueprints.append(AndroidBuildGradleBlueprint.from_dict(module))
        except KeyError as e:
            raise BlueprintLoadError(f"Module #{index} in {path} is missing required field {e}") from e
        except (TypeError, ValueError) as e:
            raise BlueprintLoadError(f"Module #{index} in {path} is invalid: {e}") from e

    logger.debug(f"Loaded {len(blueprints)} module blueprint(s) from {path}")
    return blueprints


def filter_blueprints(
    blueprints: list[AndroidBuildGradleBlueprint], package_names: list[str] | None
) -> list[AndroidBuildGradleBlueprint]:
    """Keep only blueprints whose package name was requested.

    Args:
        blueprints: Loaded blueprints
        package_names: Package names to keep, or None/empty to keep all

    Returns:
        Filtered list, preserving file order
    """
    if not package_names:
        return blueprints
    wanted = set(package_names)
    return [b for b in blueprints if b.package_name in wanted]
