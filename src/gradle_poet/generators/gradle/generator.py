"""Generate and persist build.gradle files for Android modules."""

from gradle_poet.generators.gradle.build_gradle import generate_build_gradle
from gradle_poet.logging_config import get_logger
from gradle_poet.models.blueprint import AndroidBuildGradleBlueprint
from gradle_poet.writers import FileWriter

logger = get_logger(__name__)


class AndroidModuleBuildGradleGenerator:
    """Renders a module blueprint and hands the script to a FileWriter."""

    def __init__(self, file_writer: FileWriter):
        self.file_writer = file_writer

    def generate(self, blueprint: AndroidBuildGradleBlueprint) -> None:
        """Render ``blueprint`` and write it to ``blueprint.path``.

        Args:
            blueprint: Module blueprint

        Raises:
            OSError: Propagated unchanged from the file writer
        """
        gradle_text = generate_build_gradle(blueprint)
        self.file_writer.write_to_file(gradle_text, blueprint.path)
        logger.info(f"Generated: {blueprint.path}")
