"""Command-line interface for gradle-poet."""

from pathlib import Path

import click

from gradle_poet.config import DEFAULT_OUTPUT_DIR
from gradle_poet.console import error, success, warning
from gradle_poet.generators.gradle import AndroidModuleBuildGradleGenerator
from gradle_poet.loader import BlueprintLoadError, filter_blueprints, load_blueprints
from gradle_poet.logging_config import get_logger, setup_logging
from gradle_poet.models.blueprint import AndroidBuildGradleBlueprint
from gradle_poet.writers import ConsoleWriter, FileWriter, FilesystemWriter

logger = get_logger(__name__)


class GradlePoetCLI:
    """Command-line orchestrator for gradle-poet."""

    def load(self, blueprint_file: Path, modules: tuple[str, ...] = ()) -> list[AndroidBuildGradleBlueprint]:
        """Load blueprints and apply the module filter.

        Args:
            blueprint_file: TOML blueprint file
            modules: Package names to keep (empty keeps all)

        Returns:
            Selected blueprints

        Raises:
            BlueprintLoadError: If the file cannot be loaded
        """
        blueprints = load_blueprints(blueprint_file)
        selected = filter_blueprints(blueprints, list(modules))

        if modules:
            missing = set(modules) - {b.package_name for b in selected}
            for name in sorted(missing):
                warning(f"Module not found in {blueprint_file}: {name}")

        return selected

    def execute(self, blueprint_file: Path, file_writer: FileWriter, modules: tuple[str, ...] = ()) -> int:
        """Generate build scripts for every selected module.

        Args:
            blueprint_file: TOML blueprint file
            file_writer: Sink for the rendered scripts
            modules: Package names to keep (empty keeps all)

        Returns:
            Exit code (0 for success, 1 for error)
        """
        try:
            blueprints = self.load(blueprint_file, modules)

            if not blueprints:
                logger.warning("No modules to generate")
                return 0

            generator = AndroidModuleBuildGradleGenerator(file_writer)
            for blueprint in blueprints:
                generator.generate(blueprint)

            return 0

        except BlueprintLoadError as e:
            error(str(e))
            logger.debug("Traceback:", exc_info=True)
            return 1
        except OSError as e:
            error(f"Failed to write build script: {e}")
            logger.debug("Traceback:", exc_info=True)
            return 1


@click.group()
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output (DEBUG level)",
)
@click.option(
    "-q",
    "--quiet",
    is_flag=True,
    help="Show only warnings and errors",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    help="Explicit log level (overrides -v/-q)",
)
@click.version_option(package_name="gradle-poet")
def cli(verbose, quiet, log_level):
    """Generate Android build.gradle scripts from module blueprints."""
    if sum([verbose, quiet, log_level is not None]) > 1:
        raise click.UsageError("--verbose, --quiet, and --log-level are mutually exclusive")

    setup_logging(verbose=verbose, quiet=quiet, log_level=log_level)


blueprint_argument = click.argument(
    "blueprint_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),  # type: ignore[type-var]
)

module_option = click.option(
    "-m",
    "--module",
    "modules",
    multiple=True,
    help="Only process the module with this package name (repeatable)",
)


@cli.command(name="generate")
@blueprint_argument
@module_option
@click.option(
    "-o",
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),  # type: ignore[type-var]
    default=DEFAULT_OUTPUT_DIR,
    show_default=True,
    help="Directory that relative module paths are resolved against",
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Print scripts instead of writing them",
)
def generate(blueprint_file, modules, output_dir, dry_run):
    """Write a build.gradle for every module in BLUEPRINT_FILE."""
    file_writer = ConsoleWriter() if dry_run else FilesystemWriter(output_dir)

    exit_code = GradlePoetCLI().execute(blueprint_file, file_writer, modules)
    if exit_code == 0 and not dry_run:
        success("Done")

    raise SystemExit(exit_code)


@cli.command(name="render")
@blueprint_argument
@module_option
def render(blueprint_file, modules):
    """Print rendered build.gradle scripts to stdout."""
    file_writer = ConsoleWriter(show_header=len(modules) != 1)
    exit_code = GradlePoetCLI().execute(blueprint_file, file_writer, modules)

    raise SystemExit(exit_code)


@cli.command(name="list-modules")
@blueprint_argument
def list_modules(blueprint_file):
    """List modules declared in BLUEPRINT_FILE."""
    try:
        blueprints = load_blueprints(blueprint_file)
    except BlueprintLoadError as e:
        raise click.ClickException(str(e)) from e

    if not blueprints:
        click.echo("No modules declared.")
        return

    for blueprint in blueprints:
        kind = click.style(f"[{blueprint.module_kind}]", fg="green" if blueprint.is_application else "cyan")
        click.echo(f"  {click.style(blueprint.package_name, bold=True)} {kind}")
        click.echo(f"    Path: {blueprint.path}")


def main():
    """Entry point for gradle-poet command."""
    cli()


if __name__ == "__main__":
    main()
