"""
Annotation engine.

Resolves domain objects into (qualifier, resources) terms:
- identifiers: (database, accession) → identifiers.org URI
- accumulator: qualifier → ordered resources, emitted once
- dispatcher: physical entity variants, recursing into parts
- builders: pathway, reaction, species and compartment annotations
"""

from sbml_annot.annotation.accumulator import AnnotationAccumulator, AnnotationTerm
from sbml_annot.annotation.builders import (
    AnnotationBuilder,
    CompartmentAnnotationBuilder,
    PathwayAnnotationBuilder,
    ReactionAnnotationBuilder,
    SpeciesAnnotationBuilder,
    annotate_object,
    builder_for,
)
from sbml_annot.annotation.dispatcher import Diagnostic, EntityAnnotationDispatcher
from sbml_annot.annotation.identifiers import IdentifierResolver, resolve_identifier
from sbml_annot.annotation.node import AnnotatedNode, AnnotationTarget
from sbml_annot.annotation.qualifiers import Level, Qualifier
from sbml_annot.annotation.report import terms_to_frame

__all__ = [
    "Qualifier",
    "Level",
    "IdentifierResolver",
    "resolve_identifier",
    "AnnotationAccumulator",
    "AnnotationTerm",
    "EntityAnnotationDispatcher",
    "Diagnostic",
    "AnnotationBuilder",
    "PathwayAnnotationBuilder",
    "ReactionAnnotationBuilder",
    "SpeciesAnnotationBuilder",
    "CompartmentAnnotationBuilder",
    "builder_for",
    "annotate_object",
    "AnnotatedNode",
    "AnnotationTarget",
    "terms_to_frame",
]
