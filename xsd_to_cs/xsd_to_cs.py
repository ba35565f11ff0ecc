import logging
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .codegen import CodeGenerator
from .config import CodeGeneratorConfig, NestedPlacement
from .schema_tree import SchemaLoadError
from .writer import AtomicWriter, CodeWriteError


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--namespace", "-n", default=None, type=str, help="C# namespace of the generated declarations")
@click.option("--main-type", "-m", default=None, type=str, help="Schema type rendered as the main type")
@click.option(
    "--nested-placement",
    default=None,
    type=click.Choice([p.value for p in NestedPlacement]),
    help="Place embedded declarations after the main type or inside its body",
)
@click.option("--add-generation-comment", is_flag=True, default=False, help="Add a '// Generated by' header line")
@click.option("--strict", is_flag=True, default=False, help="Fail when parts of the schema were skipped")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", required=False, default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", required=False, default=None, type=click.Path(resolve_path=True))
def xsd_to_cs(config, namespace, main_type, nested_placement, add_generation_comment, strict, verbose, path, output):
    """Generate C# classes and enums from the XSD schema at PATH into OUTPUT."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if config is not None:
        config = CodeGeneratorConfig.from_file(config)
    else:
        config = CodeGeneratorConfig()

    # CLI flags override the config file
    if namespace is not None:
        config.namespace = namespace
    if main_type is not None:
        config.main_type = main_type
    if nested_placement is not None:
        config.nested_placement = NestedPlacement(nested_placement)
    if add_generation_comment:
        config.add_generation_comment = True

    if path is None:
        path = Path(config.source_dir) / config.input_file
        if not path.exists():
            raise click.UsageError(f"No PATH given and default schema {path} does not exist")
    path = Path(path)

    if output is None:
        output = Path(config.dest_dir) / config.output_name(path.name)
    output = Path(output)

    click.echo(f"Pre-processing {path.name}...")

    try:
        codegen = CodeGenerator.from_file(path, config, reconstruct_command_line(xsd_to_cs))
    except SchemaLoadError as e:
        raise click.ClickException(str(e)) from e

    result = codegen.render()
    for warning in result.warnings:
        click.echo(f"warning: {warning}", err=True)

    if strict and result.warnings:
        raise click.ClickException(f"{len(result.warnings)} schema fragment(s) skipped")

    try:
        AtomicWriter().write(output, result.text)
    except CodeWriteError as e:
        raise click.ClickException(str(e)) from e

    click.echo("Finished pre-processing.")


if __name__ == "__main__":
    xsd_to_cs()
