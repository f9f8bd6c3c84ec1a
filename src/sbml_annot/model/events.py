"""
Events: pathways and reaction-like events.
"""

from typing import Annotated

from pydantic import Field

from sbml_annot.model.base import (
    CatalystActivity,
    Compartment,
    DatabaseIdentifier,
    DatabaseObject,
    Disease,
    GOBiologicalProcess,
    PublicationList,
    polymorphic,
)
from sbml_annot.model.entities import PhysicalEntity

ParticipantList = Annotated[list[PhysicalEntity], polymorphic("PhysicalEntity")]


class Event(DatabaseObject):
    """Anything that happens: a pathway or a reaction."""

    go_biological_process: GOBiologicalProcess | None = None
    literature_reference: PublicationList = Field(default_factory=list)
    disease: list[Disease] = Field(default_factory=list)
    cross_reference: list[DatabaseIdentifier] = Field(default_factory=list)
    compartment: list[Compartment] = Field(default_factory=list)
    is_in_disease: bool = False


class Pathway(Event):
    schema_aliases = ("TopLevelPathway", "CellLineagePath")

    has_event: Annotated[list[Event], polymorphic("Event")] = Field(default_factory=list)


class ReactionLikeEvent(Event):
    catalyst_activity: list[CatalystActivity] = Field(default_factory=list)
    input: ParticipantList = Field(default_factory=list)
    output: ParticipantList = Field(default_factory=list)


class Reaction(ReactionLikeEvent):
    pass


class BlackBoxEvent(ReactionLikeEvent):
    pass


class Polymerisation(ReactionLikeEvent):
    pass


class Depolymerisation(ReactionLikeEvent):
    pass


class FailedReaction(ReactionLikeEvent):
    pass
