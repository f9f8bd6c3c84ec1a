"""
Tabular view of attached annotation terms.
"""

from collections.abc import Iterable

import polars as pl

from sbml_annot.annotation.accumulator import AnnotationTerm

SCHEMA = {
    "node_id": pl.Utf8,
    "qualifier": pl.Utf8,
    "position": pl.Int64,
    "resource": pl.Utf8,
}


def terms_to_frame(node_id: str, terms: Iterable[AnnotationTerm]) -> pl.DataFrame:
    """
    Flatten terms to one row per resource.

    ``position`` is the resource's index within its qualifier group.
    """
    rows = [
        {
            "node_id": node_id,
            "qualifier": term.qualifier.value,
            "position": i,
            "resource": uri,
        }
        for term in terms
        for i, uri in enumerate(term.resources)
    ]
    return pl.DataFrame(rows, schema=SCHEMA)
