"""
Grouping of resources by qualifier.

One accumulator belongs to one builder invocation: resources are added in
discovery order, then emitted once as annotation terms.
"""

import logging
from dataclasses import dataclass

from sbml_annot.annotation.identifiers import IdentifierResolver
from sbml_annot.annotation.qualifiers import Qualifier

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AnnotationTerm:
    """A qualifier with the resources attached under it."""
    qualifier: Qualifier
    resources: tuple[str, ...]

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"qualifier": self.qualifier.value, "resources": list(self.resources)}


class AnnotationAccumulator:
    """Ordered qualifier → resources mapping, finalized by emit()."""

    def __init__(self, resolver: IdentifierResolver | None = None):
        self.resolver = resolver or IdentifierResolver()
        self._groups: dict[Qualifier, list[str]] = {}
        self._emitted = False

    def add(self, qualifier: Qualifier, uri: str | None) -> None:
        """
        Append a resource under a qualifier.

        A None uri (suppressed database) is ignored.
        """
        if self._emitted:
            raise RuntimeError("accumulator already emitted")
        if uri is None:
            return
        self._groups.setdefault(qualifier, []).append(uri)
        logger.debug("%s %s", qualifier.value, uri)

    def add_resource(self, database_name: str, qualifier: Qualifier, accession: str | int) -> None:
        """Resolve (database, accession) and add the result."""
        self.add(qualifier, self.resolver.resolve(database_name, accession))

    def resources(self, qualifier: Qualifier) -> tuple[str, ...]:
        """Resources collected so far under one qualifier."""
        return tuple(self._groups.get(qualifier, ()))

    def __len__(self) -> int:
        return sum(len(uris) for uris in self._groups.values())

    def emit(self) -> list[AnnotationTerm]:
        """Finalize and return one term per qualifier that received resources."""
        if self._emitted:
            raise RuntimeError("accumulator already emitted")
        self._emitted = True
        return [AnnotationTerm(q, tuple(uris)) for q, uris in self._groups.items()]
