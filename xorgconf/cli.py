import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from xorgconf.errors import XorgconfError
from xorgconf.loader import dump_document, json_dumps, load_document
from xorgconf.sections import SECTION_TYPES

try:
    __version__ = version("xorgconf")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from output formats to the file name used inside directories.
DEFAULT_FILE_NAMES = {
    "conf": "xorg.conf",
    "json": "xorg.json",
    "yaml": "xorg.yaml",
}


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="XORGCONF_LOG_FILE",
)
@click.version_option(__version__, prog_name="xorgconf")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument(
    "description", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    envvar="XORGCONF_OUTPUT",
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["conf", "json", "yaml"]),
    default="conf",
    help="Output format.",
)
def render(
    description: str,
    output_path: Optional[str] = None,
    output_format: str = "conf",
) -> None:
    """Render a YAML or JSON description of the sections.

    Args:
        description: Path of the description file.
        output_path: Optional file or directory for the result. A
            directory receives ``xorg.conf`` (or ``xorg.json``/``xorg.yaml``).
        output_format: ``conf`` for the configuration file itself, ``json``
            or ``yaml`` for the normalized description.
    """

    try:
        doc = load_document(Path(description))
    except XorgconfError as exc:
        raise click.ClickException(str(exc)) from exc

    # Determine the output file path if one was provided.
    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        if final_path.is_dir():
            final_path = final_path / DEFAULT_FILE_NAMES[output_format]

    if output_format == "conf":
        try:
            content = doc.render()
        except XorgconfError as exc:
            raise click.ClickException(str(exc)) from exc

        # An empty document is not an error, just nothing to write.
        if content is None:
            click.echo("No sections to render.", err=True)
            return
    elif output_format == "json":
        content = json_dumps(dump_document(doc)) + "\n"
    else:
        content = yaml.safe_dump(
            dump_document(doc), allow_unicode=True, sort_keys=False
        )

    if final_path:
        final_path.write_text(content, encoding="utf-8")
        logging.info("Wrote %s", final_path)
    else:
        click.echo(content, nl=False)


@cli.command()
@click.argument(
    "description", type=click.Path(exists=True, dir_okay=False)
)
@click.option(
    "--type",
    "section_name",
    type=click.Choice(sorted(SECTION_TYPES)),
    default=None,
    help="Only list sections of this type.",
)
@click.option(
    "--identifier", default=None, help="Only list sections with this name."
)
def sections(
    description: str,
    section_name: Optional[str] = None,
    identifier: Optional[str] = None,
) -> None:
    """List the sections of a description, one per line.

    Args:
        description: Path of the description file.
        section_name: Optional section type filter.
        identifier: Optional identifier filter.
    """

    try:
        doc = load_document(Path(description))
    except XorgconfError as exc:
        raise click.ClickException(str(exc)) from exc

    for section in doc.get_sections(section_name, identifier):
        name = getattr(section, "identifier", None)
        if name:
            click.echo(f"{section.section_name}\t{name}")
        else:
            click.echo(section.section_name)
