import json
import logging
from pathlib import Path

import click

from .pipeline import Grammar, OutputMode, PipelineGenerator, SchemaGenerationError, SchemaGeneratorConfig


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, dir_okay=False, resolve_path=True))
@click.option("--grammar", "-g", default=None, type=click.Choice([g.value for g in Grammar]))
@click.option("--indent", "-i", default=None, type=int, help="Pretty-print the JSON with this indent")
@click.option(
    "--output",
    "-o",
    default=None,
    type=click.Path(dir_okay=False, resolve_path=True),
    help="Write the schema to this file instead of stdout",
)
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log extraction details to stderr")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, resolve_path=True))
def ts_interface_schema(config, grammar, indent, output, force, verbose, path):
    """Convert the TypeScript interfaces in PATH into a Record schema."""
    _configure_logging(verbose)

    if config is not None:
        try:
            with open(config) as f:
                config = SchemaGeneratorConfig.from_dict(json.load(f))
        except (OSError, ValueError) as e:
            raise click.ClickException(f"Invalid config file {config}: {e}") from e
    else:
        config = SchemaGeneratorConfig()

    # CLI flags override the config file
    if grammar is not None:
        config.grammar = Grammar(grammar)
    if indent is not None:
        config.indent = indent
    if force:
        config.output.mode = OutputMode.FORCE

    try:
        with open(path, encoding="utf-8") as f:
            code = f.read()
    except OSError as e:
        raise click.ClickException(f"Error opening the file: {e}") from e
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Failed to read the file as text: {e}") from e

    try:
        generator = PipelineGenerator(config)
        out = generator.generate(code)
        if output is None:
            click.echo(out)
        else:
            generator.write(out, Path(output))
    except (SchemaGenerationError, OSError) as e:
        raise click.ClickException(str(e)) from e
