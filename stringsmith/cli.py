"""Command-line interface for the string extraction pipeline."""

import os
from pathlib import Path
from typing import Dict, Optional, Tuple, Type

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import config
from .errors import StringsmithError, UsageError
from .extraction.aggregate_parser import AggregateParser
from .extraction.po_parser import PoParser
from .generation.android_generator import AndroidGenerator
from .generation.generator import Generator
from .generation.registry import generator_registry
from .validation.string_analyzer import StringAnalyzer

PROG_NAME = "stringsmith"

console = Console(stderr=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__)
@click.option(
    "--input", "-i",
    "input_paths",
    multiple=True,
    help="Input directory, search pattern, or file to parse (non-recursive)"
)
@click.option(
    "--output", "-o",
    "output_path",
    default="-",
    show_default=True,
    help="Output file for extracted string resources ('-' for stdout)"
)
@click.option(
    "--source-root", "-r",
    "source_root",
    default=None,
    help="Root directory of source code, used to relativize references"
)
@click.option(
    "--generator", "-g",
    "generator_name",
    default=None,
    help="Generator to use (po|android)"
)
@click.option(
    "--analyze", "-a",
    is_flag=True,
    help="Run the string analyzer after parsing"
)
@click.option(
    "--reduce-master",
    default=None,
    help="Reduce a master localized PO file, keeping only strings defined by --reduce-retain"
)
@click.option(
    "--reduce-retain",
    default=None,
    help="An unlocalized PO[T] file deciding which strings from --reduce-master are retained"
)
@click.option(
    "--android-input-strings-xml",
    default=None,
    help="Input file of unlocalized, hand-maintained Android strings.xml"
)
@click.option(
    "--android-output-strings-xml",
    default=None,
    help="Output file for the localized hand-maintained Android strings.xml"
)
@click.option(
    "--log", "-l",
    is_flag=True,
    help="Display logging"
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    help="Verbose logging"
)
@click.pass_context
def cli(
    ctx: click.Context,
    input_paths: Tuple[str, ...],
    output_path: str,
    source_root: Optional[str],
    generator_name: Optional[str],
    analyze: bool,
    reduce_master: Optional[str],
    reduce_retain: Optional[str],
    android_input_strings_xml: Optional[str],
    android_output_strings_xml: Optional[str],
    log: bool,
    verbose: bool,
):
    """Extract translatable strings and generate localization catalogs."""
    generators = ctx.obj or generator_registry()

    if verbose:
        log_level = 2
    elif log:
        log_level = 1
    else:
        log_level = config.log_level

    try:
        _check_config()
        source_root = _resolve_source_root(source_root or config.source_root)
        generator = _create_generator(generators, generator_name or config.generator, log_level)
        _check_reduce_options(reduce_master, reduce_retain)
    except UsageError as e:
        console.print(f"{PROG_NAME}: {escape(str(e))}", soft_wrap=True)
        console.print(f"Try `{PROG_NAME} --help` for more information.")
        return

    try:
        if reduce_master is not None:
            reduce(generator, reduce_master, reduce_retain, output_path, source_root, log_level)
            return

        extract(
            generator,
            input_paths,
            output_path,
            source_root=source_root,
            analyze=analyze,
            log_level=log_level,
        )

        if isinstance(generator, AndroidGenerator) and android_input_strings_xml and android_output_strings_xml:
            generator.localize_manual_strings_xml(android_input_strings_xml, android_output_strings_xml)
    except (StringsmithError, OSError) as e:
        raise click.ClickException(str(e)) from e


def reduce(
    generator: Generator,
    master_path: str,
    retain_path: str,
    output_path: str,
    source_root: Optional[str] = None,
    log_level: int = 0,
) -> None:
    """Write the strings of a master catalog that a retain catalog still defines."""
    master = PoParser(source_root_path=source_root, log_level=log_level, console=console)
    retain = PoParser(source_root_path=source_root, log_level=log_level, console=console)

    master.add(master_path)
    retain.add(retain_path)

    generator.reduce(master, retain)
    generator.generate(output_path)


def extract(
    generator: Generator,
    input_paths: Tuple[str, ...],
    output_path: str,
    source_root: Optional[str] = None,
    analyze: bool = False,
    log_level: int = 0,
) -> None:
    """Parse every input, feed the strings to the generator and write its output."""
    parser = AggregateParser(source_root_path=source_root, log_level=log_level, console=console)
    for input_path in input_paths:
        add_input(parser, input_path)

    analyzer = StringAnalyzer(console=console) if analyze else None

    count = 0
    for localized in parser.parse():
        generator.add(localized)
        if analyzer is not None:
            analyzer.add(localized)
        count += 1

    if log_level >= 1:
        console.print(f"[green]Found:[/green] {count} strings")

    if analyzer is not None:
        analyzer.analyze()

    if log_level >= 1:
        console.print(f"[blue]Writing:[/blue] {escape(output_path)}", soft_wrap=True)
    generator.generate(output_path)


def add_input(parser: AggregateParser, input_path: str) -> None:
    """
    Register a file, a directory, or a directory plus filename pattern.

    Explicit files must be supported by a parser. Files found by scanning
    a directory are skipped when no parser supports them, and directories
    that do not exist are skipped entirely.
    """
    if os.path.isfile(input_path):
        parser.add(input_path)
        return

    directory = Path(input_path)
    pattern = "*"
    if not directory.is_dir():
        pattern = directory.name
        directory = directory.parent
        if not directory.is_dir():
            parser.log(1, f"Skipping unresolvable input: {input_path}")
            return

    for path in sorted(directory.glob(pattern)):
        if not path.is_file():
            continue
        if not parser.supports_path(path):
            parser.log(1, f"Skipping unsupported file: {path}")
            continue
        parser.add(path)


def _check_config() -> None:
    errors = config.validate()
    if errors:
        raise UsageError("; ".join(errors))


def _resolve_source_root(source_root: Optional[str]) -> Optional[str]:
    if source_root is None:
        return None
    if not os.path.isdir(source_root):
        raise UsageError("invalid source-root")
    return os.path.abspath(source_root)


def _create_generator(
    generators: Dict[str, Type[Generator]], name: str, log_level: int
) -> Generator:
    generator_type = generators.get(name.lower())
    if generator_type is None:
        raise UsageError(f"invalid generator (choose from {'|'.join(generators)})")
    return generator_type(log_level=log_level, console=console)


def _check_reduce_options(reduce_master: Optional[str], reduce_retain: Optional[str]) -> None:
    if reduce_master is not None and reduce_retain is None:
        raise UsageError("reduce-retain must be specified if reduce-master is")
    if reduce_master is None and reduce_retain is not None:
        raise UsageError("reduce-master must be specified if reduce-retain is")


def main():
    """Console entry point."""
    cli(obj=generator_registry())


if __name__ == "__main__":
    main()
