"""
Output node stand-in.

The document assembler owns the real output elements; anything with an
``add_cv_term`` method can receive annotations. AnnotatedNode is the
in-memory version used by the CLI and tests.
"""

from dataclasses import dataclass, field
from typing import Protocol

from sbml_annot.annotation.accumulator import AnnotationTerm


class AnnotationTarget(Protocol):
    """Output element that accepts annotation terms, append-only."""

    def add_cv_term(self, term: AnnotationTerm) -> None: ...


@dataclass
class AnnotatedNode:
    """Output element with the terms attached to it."""
    id: str
    cv_terms: list[AnnotationTerm] = field(default_factory=list)

    def add_cv_term(self, term: AnnotationTerm) -> None:
        """Attach one term after any already present."""
        self.cv_terms.append(term)

    def term(self, qualifier) -> AnnotationTerm | None:
        """First term attached under a qualifier, if any."""
        for t in self.cv_terms:
            if t.qualifier == qualifier:
                return t
        return None

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {"id": self.id, "cv_terms": [t.to_dict() for t in self.cv_terms]}
