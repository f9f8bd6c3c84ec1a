"""
Read-only domain objects consumed by the annotation engine.

Shapes follow the Reactome data model; nested objects are loaded into the
most specific class registered for their ``schemaClass``.
"""

from sbml_annot.model.base import (
    AbstractModifiedResidue,
    CatalystActivity,
    Compartment,
    DatabaseIdentifier,
    DatabaseObject,
    Disease,
    GOBiologicalProcess,
    GOMolecularFunction,
    GOTerm,
    LiteratureReference,
    PsiMod,
    Publication,
    ReferenceEntity,
    TranslationalModification,
    load_object,
)
from sbml_annot.model.entities import (
    CandidateSet,
    ChemicalDrug,
    Complex,
    DefinedSet,
    Drug,
    EntitySet,
    EntityWithAccessionedSequence,
    GenomeEncodedEntity,
    OpenSet,
    OtherEntity,
    PhysicalEntity,
    Polymer,
    ProteinDrug,
    RNADrug,
    SimpleEntity,
)
from sbml_annot.model.events import (
    BlackBoxEvent,
    Depolymerisation,
    Event,
    FailedReaction,
    Pathway,
    Polymerisation,
    Reaction,
    ReactionLikeEvent,
)
from sbml_annot.model.loader import load_json, loads

__all__ = [
    # Base and reference data
    "DatabaseObject",
    "ReferenceEntity",
    "DatabaseIdentifier",
    "Disease",
    "Publication",
    "LiteratureReference",
    "GOTerm",
    "GOBiologicalProcess",
    "GOMolecularFunction",
    "Compartment",
    "CatalystActivity",
    "PsiMod",
    "AbstractModifiedResidue",
    "TranslationalModification",
    # Physical entities
    "PhysicalEntity",
    "SimpleEntity",
    "GenomeEncodedEntity",
    "EntityWithAccessionedSequence",
    "Complex",
    "EntitySet",
    "DefinedSet",
    "CandidateSet",
    "OpenSet",
    "Polymer",
    "Drug",
    "ChemicalDrug",
    "ProteinDrug",
    "RNADrug",
    "OtherEntity",
    # Events
    "Event",
    "Pathway",
    "ReactionLikeEvent",
    "Reaction",
    "BlackBoxEvent",
    "Polymerisation",
    "Depolymerisation",
    "FailedReaction",
    # Loading
    "load_object",
    "load_json",
    "loads",
]
