"""csvtable command - render CSV-like text as an aligned table."""

import signal
import sys

import click
from pydantic import ValidationError

from .. import __version__
from ..core.errors import CsvTableError, FatalInputError
from ..core.pipeline import TablePipeline
from ..models.config import TableConfig

# Handle SIGPIPE gracefully (e.g., when piped to `head`)
signal.signal(signal.SIGPIPE, signal.SIG_DFL)


def _open_input(source, encoding):
    """Open FILE, or stdin for None / "-". Undecodable bytes are replaced."""
    try:
        return click.open_file(source or "-", encoding=encoding, errors="replace")
    except OSError as e:
        raise FatalInputError(f"Cannot open {source}: {e.strerror or e}") from e


def _validation_message(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"])
        parts.append(f"{loc}: {err['msg']}" if loc else err["msg"])
    return "; ".join(parts)


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("source", required=False)
@click.option(
    "-c",
    "--columns",
    help="Columns to show, e.g. '1,3-5' or '5-3' (1-based, in output order)",
)
@click.option(
    "-d",
    "--delimiter",
    help="Field separator; skips auto-detection ('\\t' or 'tab' for tab)",
)
@click.option(
    "-H",
    "--no-header",
    "no_header",
    is_flag=True,
    help="Do not treat the first row as a header",
)
@click.option(
    "-n",
    "--linenumbers",
    "line_numbers",
    is_flag=True,
    help="Prepend input line numbers",
)
@click.option(
    "-o",
    "--output-field-separator",
    "output_separator",
    help="Join fields with this string instead of drawing a box",
)
@click.option(
    "-q",
    "--quotechar",
    default='"',
    show_default=True,
    help="Quote character",
)
@click.option(
    "-s",
    "--snifflimit",
    "sniff_limit",
    type=int,
    default=1000,
    show_default=True,
    help="Lines sampled for delimiter and width detection (0 = all)",
)
@click.option(
    "-m",
    "--maxfieldsize",
    "max_field_size",
    type=int,
    default=0,
    show_default=True,
    help="Max column width: N>0 wraps, N<0 truncates at -N, 0 is unlimited",
)
@click.option(
    "-e",
    "--encoding",
    default="utf-8",
    show_default=True,
    help="Input encoding (undecodable bytes are replaced)",
)
@click.option(
    "--ascii-width",
    is_flag=True,
    help="Count one column per character instead of using wcwidth",
)
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Report detected separator and column widths on stderr",
)
@click.version_option(__version__, prog_name="csvtable")
def cli(
    source,
    columns,
    delimiter,
    no_header,
    line_numbers,
    output_separator,
    quotechar,
    sniff_limit,
    max_field_size,
    encoding,
    ascii_width,
    verbose,
):
    """Render delimiter-separated text from SOURCE as an aligned table.

    SOURCE is a file name; omit it or use '-' to read standard input.
    The separator is sniffed from the first lines unless --delimiter is
    given. Numeric columns are right-aligned.

    Examples:

        # Box-drawn table with auto-detected separator
        csvtable data.csv

        # Columns 3, 2, 1 with line numbers
        csvtable -c 3-1 -n data.csv

        # Wrap long fields at 30 columns
        cat data.txt | csvtable -m 30

        # Cut fields at 12 columns, pipe-joined output
        csvtable -m -12 -o ' | ' data.csv
    """
    try:
        config = TableConfig(
            columns=columns,
            delimiter=delimiter,
            header=not no_header,
            line_numbers=line_numbers,
            output_separator=output_separator,
            quotechar=quotechar,
            sniff_limit=sniff_limit,
            max_field_size=max_field_size,
            wide_chars=not ascii_width,
            encoding=encoding,
        )
        pipeline = TablePipeline(config, verbose=verbose)

        with _open_input(source, config.encoding) as stream:
            for line in pipeline.run(stream):
                click.echo(line)

    except BrokenPipeError:
        # Gracefully handle broken pipe (e.g., piping to `head`)
        # Close stdout to avoid further errors
        try:
            sys.stdout.close()
        except BrokenPipeError:
            pass
        sys.exit(0)

    except ValidationError as e:
        click.echo(f"Error: {_validation_message(e)}", err=True)
        sys.exit(1)

    except CsvTableError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
