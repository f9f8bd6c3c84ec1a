"""
identifiers.org URI construction.

    resolve_identifier("ChEBI", "15377")    -> http://identifiers.org/chebi/CHEBI:15377
    resolve_identifier("UniProt", "P12345") -> http://identifiers.org/uniprot/P12345
    resolve_identifier("EMBL", "X01234")    -> None (suppressed)
"""

from collections.abc import Iterable

from sbml_annot.config import settings

# UniProt accessions are registered without a namespace prefix
UNPREFIXED_DATABASES = frozenset({"uniprot"})


class IdentifierResolver:
    """Turn (database name, accession) pairs into canonical resource URIs."""

    def __init__(self, base_url: str | None = None, suppressed: Iterable[str] | None = None):
        base = base_url if base_url is not None else settings.identifiers_base_url
        self.base_url = base.rstrip("/")
        if suppressed is None:
            suppressed = settings.suppressed_databases
        self.suppressed = frozenset(db.lower() for db in suppressed)

    def resolve(self, database_name: str, accession: str | int) -> str | None:
        """
        Build the URI for one accession.

        Args:
            database_name: Source database as named in the data (any case)
            accession: Accession within that database

        Returns:
            Resource URI, or None when the database is suppressed
        """
        db = database_name.lower()
        if db in self.suppressed:
            return None
        if db in UNPREFIXED_DATABASES:
            return f"{self.base_url}/{db}/{accession}"
        return f"{self.base_url}/{db}/{database_name.upper()}:{accession}"

    __call__ = resolve


def resolve_identifier(database_name: str, accession: str | int) -> str | None:
    """Resolve with the configured base URL and suppression list."""
    return IdentifierResolver().resolve(database_name, accession)
