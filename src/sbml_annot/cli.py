"""
Command-line interface for sbml_annot.

Commands:
- annotate: Annotate one domain object from a JSON file and show the terms
- resolve: Show the resource URI for a database accession
"""

import json
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.table import Table

from sbml_annot.log import configure_logging

app = typer.Typer(
    name="sbml-annot",
    help="Pathway annotation inspection CLI",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    log_level: str | None = typer.Option(
        None, "--log-level", "-l", help="Logging level (default from SBML_ANNOT_LOG_LEVEL)"
    ),
):
    """Pathway annotation inspection CLI."""
    configure_logging(log_level.upper() if log_level else None)


@app.command()
def annotate(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON file with one domain object"),
    csv: Path | None = typer.Option(None, "--csv", help="Write flattened terms as CSV"),
    parquet: Path | None = typer.Option(None, "--parquet", help="Write flattened terms as Parquet"),
):
    """Annotate a pathway, reaction, physical entity or compartment."""
    from sbml_annot.annotation import AnnotatedNode, annotate_object, terms_to_frame
    from sbml_annot.model import load_json

    try:
        obj = load_json(path)
    except (json.JSONDecodeError, ValidationError) as e:
        console.print(f"[bold red]Could not load {path.name}:[/] {e}")
        raise typer.Exit(code=1)

    node = AnnotatedNode(obj.st_id or path.stem)
    try:
        builder = annotate_object(obj, node)
    except TypeError as e:
        console.print(f"[bold red]{e}[/]")
        raise typer.Exit(code=1)

    table = Table(title=f"Annotations: {node.id} ({obj.schema_name})", show_header=True)
    table.add_column("Qualifier", style="cyan")
    table.add_column("Resources", style="green")
    for term in node.cv_terms:
        table.add_row(term.qualifier.value, "\n".join(term.resources))
    console.print(table)

    for diag in builder.diagnostics:
        console.print(f"[yellow]![/] {diag.st_id} ({diag.schema_class}): {diag.message}")

    if csv or parquet:
        df = terms_to_frame(node.id, node.cv_terms)
        if csv:
            df.write_csv(csv)
            console.print(f"    [green]✓[/] {csv}: {len(df):,} rows")
        if parquet:
            df.write_parquet(parquet)
            console.print(f"    [green]✓[/] {parquet}: {len(df):,} rows")


@app.command()
def resolve(
    database: str = typer.Argument(..., help="Database name (e.g. ChEBI, UniProt)"),
    accession: str = typer.Argument(..., help="Accession within the database"),
):
    """Show the identifiers.org URI for an accession."""
    from sbml_annot.annotation import resolve_identifier

    uri = resolve_identifier(database, accession)
    if uri is None:
        console.print(f"[yellow]{database} is suppressed, no resource[/]")
    else:
        console.print(uri)


if __name__ == "__main__":
    app()
