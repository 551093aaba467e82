"""
iarlst - IAR Listing Reformatter Command-Line Interface
========================================================

Reformats an IAR mixed source/assembly listing (.lst, produced with -lC)
into aligned instructions tagged with their source line numbers.

Usage Examples
--------------
Print the reformatted listing:
    $ iarlst main.lst

JSON output for a renderer:
    $ iarlst main.lst --format json -o main.json

Show label references:
    $ iarlst main.lst --labels

Wider columns:
    $ iarlst main.lst --mnemonic-width 10 --operand-width 24

Fail if nothing could be extracted:
    $ iarlst main.lst --strict

Column widths default to the IAR_LISTING_* environment variables (see
iar_listing.config), then to the built-in layout.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Sequence

import click

from iar_listing import __version__
from iar_listing.config import ListingConfig
from iar_listing.errors import ListingFormatError
from iar_listing.parser import ListingParser, split_listing
from iar_listing.records import InstructionRecord, ParseResult
from iar_listing.cli.errors import handle_cli_exception


# =============================================================================
# Helpers
# =============================================================================

def build_config(
    indent: Optional[int] = None,
    mnemonic_width: Optional[int] = None,
    operand_width: Optional[int] = None,
) -> ListingConfig:
    """
    Combine environment defaults with command-line overrides.

    Raises:
        ConfigError: If a resulting width is negative
    """
    config = ListingConfig.from_env()
    if indent is not None:
        config.indent_width = indent
    if mnemonic_width is not None:
        config.mnemonic_width = mnemonic_width
    if operand_width is not None:
        config.operand_width = operand_width
    return config.validate()


def check_result(
    result: ParseResult,
    lines: Sequence[str],
    filename: Optional[str] = None,
) -> ParseResult:
    """
    Reject an empty result for a listing that had content.

    Raises:
        ListingFormatError: If lines contain text but no record was emitted
    """
    if not result.records and any(line.strip() for line in lines):
        raise ListingFormatError(len(lines), filename)
    return result


def format_record(record: InstructionRecord, show_labels: bool = False) -> str:
    """Format one record as 'LINE  TEXT', optionally listing label refs."""
    line = f"{record.source_line:>5}  {record.text}"
    if show_labels and record.label_refs:
        refs = ", ".join(
            f"{ref.name}@{ref.start_col}-{ref.end_col}" for ref in record.label_refs
        )
        line += f"    [{refs}]"
    return line


def format_result(result: ParseResult, output_format: str, show_labels: bool = False) -> str:
    """Render a parse result as text or JSON."""
    if output_format == "json":
        return json.dumps(result.to_dict(), indent=2) + "\n"
    return "".join(format_record(record, show_labels) + "\n" for record in result)


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "input_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Output file (default: stdout)",
)
@click.option(
    "-f", "--format", "output_format",
    type=click.Choice(["text", "json"], case_sensitive=False),
    default="text",
    help="Output format. Default: text",
)
@click.option(
    "--labels",
    "show_labels",
    is_flag=True,
    help="Append label references to each text line",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Indentation of instruction lines. Default: 4",
)
@click.option(
    "--mnemonic-width",
    type=int,
    default=None,
    help="Minimum mnemonic column width. Default: 12",
)
@click.option(
    "--operand-width",
    type=int,
    default=None,
    help="Minimum operand column width before a comment. Default: 18",
)
@click.option(
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Listing file encoding",
)
@click.option(
    "--strict",
    is_flag=True,
    help="Fail if a non-empty listing yields no instructions",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output",
)
@click.version_option(version=__version__, prog_name="iarlst")
def main(
    input_file: Path,
    output: Optional[Path],
    output_format: str,
    show_labels: bool,
    indent: Optional[int],
    mnemonic_width: Optional[int],
    operand_width: Optional[int],
    encoding: str,
    strict: bool,
    verbose: bool,
) -> None:
    """
    Reformat an IAR source/assembly listing.

    INPUT_FILE is the listing (.lst) written by the IAR compiler with the
    -lC option.

    \b
    Examples:
        iarlst main.lst                    # Aligned text on stdout
        iarlst main.lst -f json -o out.json
        iarlst main.lst --labels           # Show label references
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        config = build_config(indent, mnemonic_width, operand_width)

        text = input_file.read_text(encoding=encoding, errors="replace")
        lines = split_listing(text)
        if verbose:
            click.echo(f"Input file: {input_file} ({len(lines)} lines)", err=True)

        result = ListingParser(config).parse(lines)

        try:
            check_result(result, lines, input_file.name)
        except ListingFormatError as e:
            if strict:
                raise
            click.echo(f"Warning: {e}", err=True)

        rendered = format_result(result, output_format.lower(), show_labels)

        if output:
            output.write_text(rendered, encoding="utf-8")
            if verbose:
                click.echo(f"Output written to: {output}", err=True)
        else:
            click.echo(rendered, nl=False)

        if verbose:
            click.echo(f"Records: {len(result)}", err=True)

    except Exception as e:
        handle_cli_exception(e, verbose=verbose)


# =============================================================================
# Entry Point
# =============================================================================

if __name__ == "__main__":
    main()
