"""Blueprint data models describing one Android module's build configuration."""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from gradle_poet.config import BUILD_GRADLE_FILE_NAME
from gradle_poet.utils import unique


class DependencyMethod(Enum):
    """Gradle configuration used to declare an inter-module dependency.

    Values:
        IMPLEMENTATION: Dependency hidden from consumers
        API: Dependency exposed to consumers
        COMPILE: Legacy configuration used by older Android plugins
        COMPILE_ONLY: Needed at compile time only
        RUNTIME_ONLY: Needed at runtime only
        TEST_IMPLEMENTATION: Local unit test dependency
        ANDROID_TEST_IMPLEMENTATION: Instrumentation test dependency
    """

    IMPLEMENTATION = "implementation"
    API = "api"
    COMPILE = "compile"
    COMPILE_ONLY = "compileOnly"
    RUNTIME_ONLY = "runtimeOnly"
    TEST_IMPLEMENTATION = "testImplementation"
    ANDROID_TEST_IMPLEMENTATION = "androidTestImplementation"


@dataclass(frozen=True)
class BuildType:
    """User-declared build type emitted under buildTypes."""

    name: str
    """Build type name (e.g., 'debug', 'staging')"""

    body: str | None = None
    """Free-form Groovy lines emitted verbatim inside the build type block"""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildType":
        """Create BuildType from dictionary."""
        return cls(name=data["name"], body=data.get("body"))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "body": self.body}


@dataclass(frozen=True)
class Flavor:
    """Product flavor, optionally tagged with a flavor dimension."""

    name: str
    dimension: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Flavor":
        """Create Flavor from dictionary."""
        return cls(name=data["name"], dimension=data.get("dimension"))

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"name": self.name, "dimension": self.dimension}


@dataclass(frozen=True)
class ModuleDependency:
    """Dependency on another module of the same project."""

    method: DependencyMethod
    name: str
    """Target module name, rendered as project(':<name>')"""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ModuleDependency":
        """Create ModuleDependency from dictionary."""
        return cls(
            method=DependencyMethod(data.get("method", DependencyMethod.IMPLEMENTATION.value)),
            name=data["name"],
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"method": self.method.value, "name": self.name}


@dataclass(frozen=True)
class LibraryDependency:
    """Dependency on an external library."""

    method: str
    """Gradle configuration (e.g., 'implementation', 'kapt')"""

    name: str
    """Maven coordinate (group:artifact:version)"""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LibraryDependency":
        """Create LibraryDependency from dictionary."""
        return cls(method=data.get("method", "implementation"), name=data["name"])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {"method": self.method, "name": self.name}


def _script_path(data: dict[str, Any]) -> Path:
    if "path" in data:
        return Path(data["path"])
    return Path(data["module_root"]) / BUILD_GRADLE_FILE_NAME


def _optional(values, convert=None) -> tuple | None:
    if values is None:
        return None
    if convert is not None:
        values = [convert(v) for v in values]
    return unique(values)


@dataclass(frozen=True)
class AndroidBuildGradleBlueprint:
    """Immutable description of an Android module's build.gradle.

    Collections with set semantics (plugins, flavors, dimensions,
    dependencies) are stored as de-duplicated tuples so generation
    order is stable across runs.
    """

    path: Path
    """Where the rendered script is written"""

    package_name: str
    compile_sdk_version: int
    min_sdk_version: int
    target_sdk_version: int
    is_application: bool = False
    plugins: tuple[str, ...] = ()
    enable_data_binding: bool = False
    build_types: tuple[BuildType, ...] | None = None
    product_flavors: tuple[Flavor, ...] | None = None
    flavor_dimensions: tuple[str, ...] | None = None
    dependencies: tuple[ModuleDependency, ...] = ()
    libraries: tuple[LibraryDependency, ...] = ()
    extra_lines: tuple[str, ...] | None = None
    """Raw lines appended after the dependencies block"""

    @property
    def module_kind(self) -> str:
        """Human-readable module kind."""
        return "application" if self.is_application else "library"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AndroidBuildGradleBlueprint":
        """Create a blueprint from dictionary.

        A blueprint may give `module_root` instead of `path`; the script is
        then written to `<module_root>/build.gradle`.

        Args:
            data: Mapping with blueprint fields (snake_case keys)

        Returns:
            AndroidBuildGradleBlueprint instance

        Raises:
            KeyError: If a required field is missing
        """
        extra_lines = data.get("extra_lines")
        return cls(
            path=_script_path(data),
            package_name=data["package_name"],
            compile_sdk_version=int(data["compile_sdk_version"]),
            min_sdk_version=int(data["min_sdk_version"]),
            target_sdk_version=int(data["target_sdk_version"]),
            is_application=bool(data.get("is_application", False)),
            plugins=unique(data.get("plugins", [])),
            enable_data_binding=bool(data.get("enable_data_binding", False)),
            build_types=_optional(data.get("build_types"), BuildType.from_dict),
            product_flavors=_optional(data.get("product_flavors"), Flavor.from_dict),
            flavor_dimensions=_optional(data.get("flavor_dimensions")),
            dependencies=unique(ModuleDependency.from_dict(d) for d in data.get("dependencies", [])),
            libraries=unique(LibraryDependency.from_dict(lib) for lib in data.get("libraries", [])),
            # Order and repeats are meaningful for raw lines
            extra_lines=tuple(extra_lines) if extra_lines is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""

        def dump(values, convert=None):
            if values is None:
                return None
            return [convert(v) if convert else v for v in values]

        return {
            "path": str(self.path),
            "package_name": self.package_name,
            "compile_sdk_version": self.compile_sdk_version,
            "min_sdk_version": self.min_sdk_version,
            "target_sdk_version": self.target_sdk_version,
            "is_application": self.is_application,
            "plugins": list(self.plugins),
            "enable_data_binding": self.enable_data_binding,
            "build_types": dump(self.build_types, BuildType.to_dict),
            "product_flavors": dump(self.product_flavors, Flavor.to_dict),
            "flavor_dimensions": dump(self.flavor_dimensions),
            "dependencies": [d.to_dict() for d in self.dependencies],
            "libraries": [lib.to_dict() for lib in self.libraries],
            "extra_lines": dump(self.extra_lines),
        }
