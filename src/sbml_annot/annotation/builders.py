"""
Annotation builders, one per kind of exported element.

Each build() call owns a fresh accumulator: it collects the element's
references, emits them once and attaches every resulting term to the
builder's node.

    node = AnnotatedNode("species_123")
    SpeciesAnnotationBuilder(node).build(entity)
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from sbml_annot.annotation.accumulator import AnnotationAccumulator, AnnotationTerm
from sbml_annot.annotation.dispatcher import Diagnostic, EntityAnnotationDispatcher
from sbml_annot.annotation.identifiers import IdentifierResolver
from sbml_annot.annotation.node import AnnotationTarget
from sbml_annot.annotation.qualifiers import Level, Qualifier
from sbml_annot.config import settings
from sbml_annot.model import (
    Compartment,
    DatabaseObject,
    Event,
    LiteratureReference,
    Pathway,
    PhysicalEntity,
    ReactionLikeEvent,
)

logger = logging.getLogger(__name__)

GO_DATABASE = "go"
PUBMED_DATABASE = "pubmed"
EC_DATABASE = "ec-code"


class AnnotationBuilder(ABC):
    """Base class for builders attaching annotations to one output node."""

    def __init__(self, node: AnnotationTarget, resolver: IdentifierResolver | None = None):
        self.node = node
        self.resolver = resolver or IdentifierResolver()
        self.diagnostics: list[Diagnostic] = []

    @abstractmethod
    def build(self, obj: DatabaseObject) -> list[AnnotationTerm]:
        """
        Collect, emit and attach the annotations for one object.

        Returns:
            Terms attached to the node, in attachment order
        """
        pass

    def _new_accumulator(self) -> AnnotationAccumulator:
        self.diagnostics = []
        return AnnotationAccumulator(self.resolver)

    def _emit(self, acc: AnnotationAccumulator) -> list[AnnotationTerm]:
        terms = acc.emit()
        for term in terms:
            self.node.add_cv_term(term)
        return terms

    def _add_self_reference(self, acc: AnnotationAccumulator, obj: DatabaseObject) -> None:
        if obj.st_id:
            acc.add_resource(settings.reactome_database, Qualifier.IS, obj.st_id)

    def _add_publications(self, acc: AnnotationAccumulator, event: Event) -> None:
        for pub in event.literature_reference:
            if isinstance(pub, LiteratureReference) and pub.pubmed_identifier is not None:
                acc.add_resource(PUBMED_DATABASE, Qualifier.IS_DESCRIBED_BY, pub.pubmed_identifier)

    def _add_diseases(self, acc: AnnotationAccumulator, event: Event) -> None:
        for disease in event.disease:
            acc.add_resource(disease.database_name, Qualifier.OCCURS_IN, disease.identifier)


class PathwayAnnotationBuilder(AnnotationBuilder):
    """Model-level annotations for a pathway."""

    def build(self, pathway: Pathway) -> list[AnnotationTerm]:
        acc = self._new_accumulator()
        self._add_self_reference(acc, pathway)
        if pathway.go_biological_process is not None:
            acc.add_resource(GO_DATABASE, Qualifier.IS, pathway.go_biological_process.accession)
        self._add_publications(acc, pathway)
        self._add_diseases(acc, pathway)
        for xref in pathway.cross_reference:
            acc.add_resource(xref.database_name, Qualifier.HAS_INSTANCE, xref.identifier)
        return self._emit(acc)

    def build_from_events(self, events: Iterable[Event]) -> list[AnnotationTerm]:
        """
        Publications of a list of events only.

        Used for a container model whose own pathway carries no literature
        but whose sub-events do.
        """
        acc = self._new_accumulator()
        for event in events:
            self._add_publications(acc, event)
        return self._emit(acc)


class ReactionAnnotationBuilder(AnnotationBuilder):
    """Annotations for a reaction-like event."""

    def build(self, event: ReactionLikeEvent) -> list[AnnotationTerm]:
        acc = self._new_accumulator()
        self._add_self_reference(acc, event)
        self._add_go_term(acc, event)
        # EC numbers come from every catalyst, unlike the GO fallback above
        for catalyst in event.catalyst_activity:
            if catalyst.ec_number is not None:
                acc.add_resource(EC_DATABASE, Qualifier.IS, catalyst.ec_number)
        self._add_publications(acc, event)
        self._add_diseases(acc, event)
        return self._emit(acc)

    def _add_go_term(self, acc: AnnotationAccumulator, event: ReactionLikeEvent) -> None:
        if event.go_biological_process is not None:
            acc.add_resource(GO_DATABASE, Qualifier.IS, event.go_biological_process.accession)
        elif event.catalyst_activity:
            # Only the first catalyst is consulted for the fallback
            activity = event.catalyst_activity[0].activity
            if activity is not None:
                acc.add_resource(GO_DATABASE, Qualifier.IS, activity.accession)


class SpeciesAnnotationBuilder(AnnotationBuilder):
    """Annotations for a physical entity exported as a species."""

    def build(self, entity: PhysicalEntity) -> list[AnnotationTerm]:
        acc = self._new_accumulator()
        self._add_self_reference(acc, entity)
        dispatcher = EntityAnnotationDispatcher(acc)
        dispatcher.annotate(entity, Qualifier.IS, Level.TOP_LEVEL)
        self.diagnostics = dispatcher.diagnostics
        return self._emit(acc)


class CompartmentAnnotationBuilder(AnnotationBuilder):
    """GO cellular component of a compartment."""

    def build(self, compartment: Compartment) -> list[AnnotationTerm]:
        acc = self._new_accumulator()
        acc.add_resource(GO_DATABASE, Qualifier.IS, compartment.accession)
        return self._emit(acc)


def builder_for(obj: DatabaseObject) -> type[AnnotationBuilder]:
    """Pick the builder class for a domain object."""
    if isinstance(obj, Pathway):
        return PathwayAnnotationBuilder
    if isinstance(obj, ReactionLikeEvent):
        return ReactionAnnotationBuilder
    if isinstance(obj, PhysicalEntity):
        return SpeciesAnnotationBuilder
    if isinstance(obj, Compartment):
        return CompartmentAnnotationBuilder
    raise TypeError(f"no annotation builder for {obj.schema_name}")


def annotate_object(obj: DatabaseObject, node: AnnotationTarget) -> AnnotationBuilder:
    """
    Annotate any supported object onto a node.

    Returns:
        The builder used, so callers can inspect its diagnostics
    """
    builder = builder_for(obj)(node)
    terms = builder.build(obj)
    logger.debug("%s: %d term(s) attached", obj.st_id or obj.schema_name, len(terms))
    return builder
