"""
Physical entity variants.

Class names follow the Reactome data model. The SequenceEntity variant is
``EntityWithAccessionedSequence`` and, as in Reactome, it is a subclass of
``GenomeEncodedEntity``.
"""

from typing import Annotated

from pydantic import Field

from sbml_annot.model.base import (
    AbstractModifiedResidue,
    Compartment,
    DatabaseIdentifier,
    DatabaseObject,
    Disease,
    PublicationList,
    ReferenceEntity,
    polymorphic,
)

EntityList = Annotated[list["PhysicalEntity"], polymorphic("PhysicalEntity")]


class PhysicalEntity(DatabaseObject):
    """Base of every participant. Loaded directly only for unknown schema classes."""

    compartment: list[Compartment] = Field(default_factory=list)
    literature_reference: PublicationList = Field(default_factory=list)
    disease: list[Disease] = Field(default_factory=list)
    cross_reference: list[DatabaseIdentifier] = Field(default_factory=list)
    inferred_to: EntityList = Field(default_factory=list)
    inferred_from: EntityList = Field(default_factory=list)


class SimpleEntity(PhysicalEntity):
    """Small molecule, usually referencing ChEBI."""

    reference_entity: ReferenceEntity | None = None


class GenomeEncodedEntity(PhysicalEntity):
    """Gene product of unknown sequence."""


class EntityWithAccessionedSequence(GenomeEncodedEntity):
    """Protein or nucleic acid with a known reference sequence."""

    reference_entity: ReferenceEntity | None = None
    has_modified_residue: Annotated[
        list[AbstractModifiedResidue], polymorphic("AbstractModifiedResidue")
    ] = Field(default_factory=list)
    start_coordinate: int | None = None
    end_coordinate: int | None = None


class Complex(PhysicalEntity):
    has_component: EntityList = Field(default_factory=list)


class EntitySet(PhysicalEntity):
    """Set of interchangeable entities."""

    has_member: EntityList = Field(default_factory=list)


class DefinedSet(EntitySet):
    pass


class CandidateSet(EntitySet):
    has_candidate: EntityList = Field(default_factory=list)


class OpenSet(EntitySet):
    pass


class Polymer(PhysicalEntity):
    repeated_unit: EntityList = Field(default_factory=list)
    min_unit_count: int | None = None
    max_unit_count: int | None = None


class Drug(PhysicalEntity):
    """Therapeutic agent. Only the concrete drug kinds below are annotated."""

    reference_entity: ReferenceEntity | None = None


class ChemicalDrug(Drug):
    pass


class ProteinDrug(Drug):
    pass


class RNADrug(Drug):
    pass


class OtherEntity(PhysicalEntity):
    """Entity with no external reference (e.g. 'photon')."""
