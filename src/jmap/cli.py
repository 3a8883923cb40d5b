"""Command-line interface for jmap."""

import logging
import click
from pathlib import Path
from .models import FlattenConfig
from .transformer import JsonMapTransformer
from . import __version__


def _write_output(json_string: str, output: str) -> None:
    if output:
        output_path = Path(output)
        output_path.write_text(json_string, encoding='utf-8')
        click.echo(f"✅ Successfully wrote JSON to {output_path}")
    else:
        click.echo(json_string)


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
def main(verbose: bool):
    """jmap - Flatten nested JSON objects into path-keyed maps and back."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--separator', '-s', default='.', help='Path separator (default: ".")')
@click.option('--depth', '-d', default=0, help='Maximum depth; 0 or less means 15')
@click.option('--prefix', '-p', default='', help='Root path prepended to every key')
@click.option('--indent', '-i', type=int, default=None, help='Indent the output JSON')
@click.option('--output', '-o', default=None, help='Output JSON file path (default: stdout)')
def flatten(input_file: Path, separator: str, depth: int, prefix: str, indent: int, output: str):
    """Flatten a nested JSON object file."""
    config = FlattenConfig(separator=separator, max_depth=depth, prefix=prefix)
    transformer = JsonMapTransformer(config=config, indent=indent)
    result = transformer.flatten_json(input_file.read_text(encoding='utf-8'))

    for warning in result.warnings:
        click.echo(f"⚠️  {warning}", err=True)

    if not result.success:
        click.echo("❌ Flatten operation failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        raise SystemExit(1)

    _write_output(result.json_string, output)


@main.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option('--separator', '-s', default='.', help='Path separator (default: ".")')
@click.option('--prefix', '-p', default='', help='Only use keys starting with this prefix')
@click.option('--sort-keys', is_flag=True, help='Apply keys in sorted order')
@click.option('--indent', '-i', type=int, default=None, help='Indent the output JSON')
@click.option('--output', '-o', default=None, help='Output JSON file path (default: stdout)')
def unflatten(input_file: Path, separator: str, prefix: str, sort_keys: bool, indent: int, output: str):
    """Rebuild a nested JSON object from a flat JSON object file."""
    config = FlattenConfig(separator=separator, prefix=prefix, sort_keys=sort_keys)
    transformer = JsonMapTransformer(config=config, indent=indent)
    result = transformer.unflatten_json(input_file.read_text(encoding='utf-8'))

    if not result.success:
        click.echo("❌ Unflatten operation failed:", err=True)
        for error in result.errors or []:
            click.echo(f"   • {error}", err=True)
        raise SystemExit(1)

    _write_output(result.json_string, output)


if __name__ == '__main__':
    main()
