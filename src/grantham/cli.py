"""Command-line interface for grantham."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console

from grantham import __version__
from grantham.analysis.distance import grantham_distance, grantham_matrix
from grantham.analysis.pairs import amino_acid_pairs
from grantham.core.amino_acids import amino_acids
from grantham.core.codes import as_one_letter, as_three_letter
from grantham.data.tables import ALPHA, BETA, GAMMA, RHO
from grantham.errors import GranthamError
from grantham.io.output import OutputFormat, format_codes, format_matrix, format_result

# Console that writes to stderr (so status messages don't mix with data output)
stderr_console = Console(stderr=True)


def validate_path_not_flag(value: Path | None) -> Path | None:
    """Validate that a Path argument doesn't look like a flag."""
    if value is not None and str(value).startswith("-"):
        raise typer.BadParameter(
            f"'{value}' looks like a flag, not a file path. "
            "Check the order of your arguments."
        )
    return value


def parse_format(output_format: str) -> OutputFormat:
    """Convert the --format option, exiting on unknown values."""
    if output_format not in ("pretty", "tsv", "json"):
        typer.echo(
            f"Error: Invalid format '{output_format}'. Must be pretty, tsv, or json.", err=True
        )
        raise typer.Exit(1)
    return OutputFormat(output_format)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"grantham {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="grantham",
    help="grantham: amino acid distances after Grantham (1974).\n\n"
    "Look up or compute the Grantham distance between amino acids, "
    "generate amino acid pairs and convert between one- and three-letter codes.",
    no_args_is_help=True,
)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", "-v", callback=version_callback, is_eager=True),
    ] = False,
) -> None:
    """grantham: amino acid distances after Grantham (1974)."""
    pass


MethodOption = Annotated[
    str,
    typer.Option("--method", "-m", help="Distance method: original (Table 2) or exact"),
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: pretty, tsv, json"),
]
AlphaOption = Annotated[float, typer.Option("--alpha", help="Composition weight (exact)")]
BetaOption = Annotated[float, typer.Option("--beta", help="Polarity weight (exact)")]
GammaOption = Annotated[float, typer.Option("--gamma", help="Volume weight (exact)")]
RhoOption = Annotated[float, typer.Option("--rho", help="Scaling factor (exact)")]


@app.command()
def distance(
    x: Annotated[
        list[str],
        typer.Argument(help="Three-letter amino acid codes, e.g. Ser Arg"),
    ],
    y: Annotated[
        list[str],
        typer.Option("--to", "-y", help="Amino acids to pair with X (repeat the option)"),
    ],
    method: MethodOption = "original",
    output_format: FormatOption = "pretty",
    alpha: AlphaOption = ALPHA,
    beta: BetaOption = BETA,
    gamma: GammaOption = GAMMA,
    rho: RhoOption = RHO,
) -> None:
    """Grantham distance between amino acids, paired element-wise.

    A single amino acid on either side is paired with every amino acid on
    the other side.

    EXAMPLES:

        grantham distance Ser --to Phe

        grantham distance Ser -y Phe -y Leu -y Arg

        grantham distance Ser Arg -y Phe -y Leu --method exact -f tsv
    """
    fmt = parse_format(output_format)

    try:
        result = grantham_distance(
            x, y, method=method, alpha=alpha, beta=beta, gamma=gamma, rho=rho
        )
    except GranthamError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(format_result(result, fmt))


@app.command()
def pairs(
    x: Annotated[
        Optional[list[str]],
        typer.Option("--x", help="First amino acid of each pair (default: all 20)"),
    ] = None,
    y: Annotated[
        Optional[list[str]],
        typer.Option("--y", help="Second amino acid of each pair (default: all 20)"),
    ] = None,
    keep_self: Annotated[
        bool,
        typer.Option("--self/--no-self", help="Keep pairs of an amino acid with itself"),
    ] = True,
    keep_duplicates: Annotated[
        bool,
        typer.Option("--duplicates/--no-duplicates", help="Keep repeated pairs"),
    ] = True,
    keep_reverses: Annotated[
        bool,
        typer.Option("--reverses/--no-reverses", help="Keep reversed pairs, e.g. Arg-Ser after Ser-Arg"),
    ] = True,
    with_distances: Annotated[
        bool,
        typer.Option("--distances", "-d", help="Also compute the distance of each pair"),
    ] = False,
    method: MethodOption = "original",
    output_format: FormatOption = "pretty",
    alpha: AlphaOption = ALPHA,
    beta: BetaOption = BETA,
    gamma: GammaOption = GAMMA,
    rho: RhoOption = RHO,
) -> None:
    """Generate amino acid pairs, by default all 400 pairs of the 20 amino acids.

    EXAMPLES:

        grantham pairs --no-self --no-reverses

        grantham pairs --x Ser --y Ala --y Trp --distances

        grantham pairs --no-self --no-reverses --distances -m exact --rho 1
    """
    fmt = parse_format(output_format)

    try:
        result = amino_acid_pairs(
            x=x or None,
            y=y or None,
            keep_self=keep_self,
            keep_duplicates=keep_duplicates,
            keep_reverses=keep_reverses,
        )
        stderr_console.print(f"[bold blue]Generated {len(result)} pairs[/bold blue]")
        if with_distances:
            result = grantham_distance(
                result.x, result.y, method=method, alpha=alpha, beta=beta, gamma=gamma, rho=rho
            )
    except GranthamError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(format_result(result, fmt))


@app.command()
def convert(
    codes: Annotated[
        list[str],
        typer.Argument(help="Amino acid codes to convert"),
    ],
    to: Annotated[
        str,
        typer.Option("--to", "-t", help="Target code: one or three"),
    ] = "one",
    output_format: FormatOption = "pretty",
) -> None:
    """Convert between three-letter and one-letter amino acid codes.

    Codes that are not recognised are reported as NA.

    EXAMPLES:

        grantham convert Ser Arg Asx

        grantham convert S R B --to three
    """
    fmt = parse_format(output_format)

    if to == "one":
        converted = as_one_letter(codes)
    elif to == "three":
        converted = as_three_letter(codes)
    else:
        typer.echo(f"Error: Invalid target '{to}'. Must be one or three.", err=True)
        raise typer.Exit(1)

    n_missing = sum(1 for c in converted if c is None)
    if n_missing:
        stderr_console.print(f"[yellow]Warning: {n_missing} code(s) not recognised[/yellow]")

    typer.echo(format_codes(codes, converted, fmt))


@app.command("amino-acids")
def list_amino_acids() -> None:
    """List the 20 standard amino acids in reference table order."""
    for code in amino_acids():
        typer.echo(code)


@app.command()
def matrix(
    method: MethodOption = "original",
    output_format: FormatOption = "pretty",
    alpha: AlphaOption = ALPHA,
    beta: BetaOption = BETA,
    gamma: GammaOption = GAMMA,
    rho: RhoOption = RHO,
    plot: Annotated[
        Optional[Path],
        typer.Option(
            "--plot",
            help="Also save a heatmap of the matrix (PNG, PDF, or SVG)",
            callback=validate_path_not_flag,
        ),
    ] = None,
) -> None:
    """Distance matrix of the 20 standard amino acids.

    EXAMPLES:

        grantham matrix

        grantham matrix --method exact -f tsv --plot grantham.png
    """
    fmt = parse_format(output_format)

    try:
        result = grantham_matrix(method=method, alpha=alpha, beta=beta, gamma=gamma, rho=rho)
    except GranthamError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    decimals = 0 if method == "original" else 2
    typer.echo(format_matrix(result, fmt, decimals=decimals))

    if plot is not None:
        from grantham.io.plotting import create_distance_heatmap

        create_distance_heatmap(
            result,
            plot,
            title=f"Grantham distances ({method})",
        )
        stderr_console.print(f"[bold green]Heatmap saved to {plot}[/bold green]")


if __name__ == "__main__":
    app()
