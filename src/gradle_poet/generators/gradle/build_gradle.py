"""build.gradle generation for Android modules (Groovy DSL).

Translates an AndroidBuildGradleBlueprint into a statement tree and
renders it. The top-level layout is always:

    apply plugin: ...      one per plugin
    android { ... }
    dependencies { ... }
    <extra lines>

Every conditional block (applicationId, dataBinding, flavors) is decided
here; the renderer only walks the tree.
"""

import re

from gradle_poet.config import (
    JAVA_COMPATIBILITY,
    LIBS_FILE_TREE,
    PROGUARD_FILES,
    TEST_INSTRUMENTATION_RUNNER,
    VERSION_CODE,
    VERSION_NAME,
)
from gradle_poet.generators.gradle.statements import (
    Block,
    KeyValue,
    Line,
    Statement,
    render_statements,
)
from gradle_poet.logging_config import get_logger
from gradle_poet.models.blueprint import (
    AndroidBuildGradleBlueprint,
    BuildType,
    Flavor,
    LibraryDependency,
    ModuleDependency,
)

logger = get_logger(__name__)

# Only real line breaks; str.splitlines also splits on form feeds and the like
LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _present(*statements: Statement | None) -> list[Statement]:
    """Keep the literal order of ``statements``, dropping absent ones."""
    return [statement for statement in statements if statement is not None]


def apply_plugins(plugins: tuple[str, ...]) -> list[Statement]:
    return [KeyValue("apply plugin:", f"'{plugin}'") for plugin in plugins]


def default_config_block(blueprint: AndroidBuildGradleBlueprint) -> Block:
    """Build the defaultConfig block.

    applicationId is only valid for application modules; library
    modules omit it.
    """
    application_id = (
        KeyValue("applicationId", f'"{blueprint.package_name}"') if blueprint.is_application else None
    )
    return Block(
        "defaultConfig",
        _present(
            application_id,
            KeyValue("minSdkVersion", str(blueprint.min_sdk_version)),
            KeyValue("targetSdkVersion", str(blueprint.target_sdk_version)),
            KeyValue("versionCode", VERSION_CODE),
            KeyValue("versionName", VERSION_NAME),
            KeyValue("multiDexEnabled", "true"),
            KeyValue("testInstrumentationRunner", TEST_INSTRUMENTATION_RUNNER),
        ),
    )


def build_type_block(build_type: BuildType) -> Block:
    body = LINE_BREAK.split(build_type.body) if build_type.body is not None else []
    return Block(build_type.name, [Line(line) for line in body])


def build_types_block(build_types: tuple[BuildType, ...] | None) -> Block:
    """Build the buildTypes block.

    A release type is always synthesized first. User-declared types follow
    in order and are not de-duplicated against it.
    """
    release = Block(
        "release",
        [
            KeyValue("minifyEnabled", "false"),
            KeyValue("proguardFiles", PROGUARD_FILES),
        ],
    )
    declared = [build_type_block(build_type) for build_type in build_types or ()]
    return Block("buildTypes", [release, *declared])


def data_binding_block() -> Block:
    return Block("dataBinding", [Line("enabled = true")])


def compile_options_block() -> Block:
    return Block(
        "compileOptions",
        [
            KeyValue("targetCompatibility", JAVA_COMPATIBILITY),
            KeyValue("sourceCompatibility", JAVA_COMPATIBILITY),
        ],
    )


def flavor_block(flavor: Flavor) -> Block:
    dimension = KeyValue("dimension", flavor.dimension) if flavor.dimension is not None else None
    return Block(flavor.name, _present(dimension))


def flavors_section(
    product_flavors: tuple[Flavor, ...] | None,
    flavor_dimensions: tuple[str, ...] | None,
) -> list[Statement]:
    """Build the flavorDimensions statement and productFlavors block.

    Returns an empty list when there are neither flavors nor dimensions.
    Otherwise productFlavors is always present, preceded by
    flavorDimensions when any dimension is declared.
    """
    if not product_flavors and not flavor_dimensions:
        return []

    dimensions = None
    if flavor_dimensions:
        dimensions = KeyValue("flavorDimensions", ", ".join(f'"{name}"' for name in flavor_dimensions))

    flavors = Block("productFlavors", [flavor_block(flavor) for flavor in product_flavors or ()])

    return _present(dimensions, flavors)


def android_block(blueprint: AndroidBuildGradleBlueprint) -> Block:
    statements = _present(
        KeyValue("compileSdkVersion", str(blueprint.compile_sdk_version)),
        default_config_block(blueprint),
        build_types_block(blueprint.build_types),
        data_binding_block() if blueprint.enable_data_binding else None,
        compile_options_block(),
    )
    statements.extend(flavors_section(blueprint.product_flavors, blueprint.flavor_dimensions))
    return Block("android", statements)


def module_dependency(dependency: ModuleDependency) -> KeyValue:
    return KeyValue(dependency.method.value, f"project(':{dependency.name}')")


def library_dependency(library: LibraryDependency) -> KeyValue:
    return KeyValue(library.method, f'"{library.name}"')


def dependencies_block(blueprint: AndroidBuildGradleBlueprint) -> Block:
    return Block(
        "dependencies",
        [
            KeyValue("implementation", LIBS_FILE_TREE),
            *(module_dependency(dependency) for dependency in blueprint.dependencies),
            *(library_dependency(library) for library in blueprint.libraries),
        ],
    )


def build_statements(blueprint: AndroidBuildGradleBlueprint) -> list[Statement]:
    """Translate a blueprint into the ordered top-level statements.

    Args:
        blueprint: Well-formed module blueprint (not validated here)

    Returns:
        Plugins, the android block, the dependencies block and any
        extra raw lines, in that order
    """
    statements: list[Statement] = apply_plugins(blueprint.plugins)
    statements.append(android_block(blueprint))
    statements.append(dependencies_block(blueprint))
    statements.extend(Line(line) for line in blueprint.extra_lines or ())

    logger.debug(f"Built {len(statements)} top-level statements for {blueprint.package_name}")
    return statements


def generate_build_gradle(blueprint: AndroidBuildGradleBlueprint) -> str:
    """Generate build.gradle content for an Android module.

    Args:
        blueprint: Module blueprint

    Returns:
        Complete build.gradle file content as a string
    """
    return render_statements(build_statements(blueprint))
