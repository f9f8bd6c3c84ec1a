"""
Physical entity annotation.

Walks a physical entity by variant and feeds the resources it finds into an
accumulator:

- SimpleEntity: reference entity, plus the first KEGG COMPOUND cross-reference
- EntityWithAccessionedSequence: reference entity; at top level also
  homologs (isHomologTo) and PSI-MOD terms of modified residues (hasVersion)
- Complex / EntitySet / Polymer: every part, recursively, as hasPart
- ChemicalDrug / ProteinDrug / RNADrug: reference entity
- GenomeEncodedEntity / OtherEntity: nothing to annotate

Any other class is recorded as a diagnostic and skipped.
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from sbml_annot.annotation.accumulator import AnnotationAccumulator
from sbml_annot.annotation.qualifiers import Level, Qualifier
from sbml_annot.config import settings
from sbml_annot.model import (
    ChemicalDrug,
    Complex,
    EntitySet,
    EntityWithAccessionedSequence,
    GenomeEncodedEntity,
    OtherEntity,
    PhysicalEntity,
    Polymer,
    ProteinDrug,
    ReferenceEntity,
    RNADrug,
    SimpleEntity,
    TranslationalModification,
)

logger = logging.getLogger(__name__)

KEGG_COMPOUND = "COMPOUND"
KEGG_DATABASE = "kegg"


@dataclass
class Diagnostic:
    """Non-fatal problem met while annotating an entity."""
    st_id: str | None
    schema_class: str
    message: str


class EntityAnnotationDispatcher:
    """Resolve physical entities (and their parts) into accumulator resources."""

    def __init__(
        self,
        accumulator: AnnotationAccumulator,
        max_depth: int | None = None,
        homolog_database: str | None = None,
    ):
        self.accumulator = accumulator
        self.max_depth = max_depth if max_depth is not None else settings.max_depth
        self.homolog_database = homolog_database or settings.reactome_database
        self.diagnostics: list[Diagnostic] = []

    def annotate(
        self,
        entity: PhysicalEntity,
        qualifier: Qualifier,
        level: Level = Level.TOP_LEVEL,
        depth: int = 0,
    ) -> None:
        """
        Add the resources for one entity under ``qualifier``.

        Args:
            entity: Entity to annotate
            qualifier: Qualifier for the entity's own references
            level: TOP_LEVEL for the species itself, NESTED for its parts
            depth: Current nesting depth
        """
        if depth > self.max_depth:
            self._diagnose(entity, f"nesting deeper than {self.max_depth}, entity skipped")
            return

        # EntityWithAccessionedSequence must be tested before GenomeEncodedEntity
        if isinstance(entity, SimpleEntity):
            self._add_reference(entity.reference_entity, qualifier)
            self._add_kegg_compound(entity, qualifier)
        elif isinstance(entity, EntityWithAccessionedSequence):
            self._add_reference(entity.reference_entity, qualifier)
            if level is Level.TOP_LEVEL:
                self._add_homologs(entity)
                self._add_modifications(entity)
        elif isinstance(entity, Complex):
            self._annotate_parts(entity.has_component, depth)
        elif isinstance(entity, EntitySet):
            self._annotate_parts(entity.has_member, depth)
        elif isinstance(entity, Polymer):
            self._annotate_parts(entity.repeated_unit, depth)
        elif isinstance(entity, (ChemicalDrug, ProteinDrug, RNADrug)):
            self._add_reference(entity.reference_entity, qualifier)
        elif isinstance(entity, (GenomeEncodedEntity, OtherEntity)):
            pass
        else:
            self._diagnose(entity, "entity class not handled, no annotation added")

    def _annotate_parts(self, parts: Iterable[PhysicalEntity], depth: int) -> None:
        for part in parts:
            self.annotate(part, Qualifier.HAS_PART, Level.NESTED, depth + 1)

    def _add_reference(self, ref: ReferenceEntity | None, qualifier: Qualifier) -> None:
        if ref is not None:
            self.accumulator.add_resource(ref.database_name, qualifier, ref.identifier)

    def _add_kegg_compound(self, entity: SimpleEntity, qualifier: Qualifier) -> None:
        for xref in entity.cross_reference:
            if xref.database_name == KEGG_COMPOUND:
                self.accumulator.add_resource(KEGG_DATABASE, qualifier, xref.identifier)
                break

    def _add_homologs(self, entity: PhysicalEntity) -> None:
        # Homologs are referenced by stable id only; their own annotations are not followed
        for homolog in [*entity.inferred_to, *entity.inferred_from]:
            if homolog.st_id:
                self.accumulator.add_resource(self.homolog_database, Qualifier.IS_HOMOLOG_TO, homolog.st_id)

    def _add_modifications(self, entity: EntityWithAccessionedSequence) -> None:
        for residue in entity.has_modified_residue:
            if isinstance(residue, TranslationalModification) and residue.psi_mod is not None:
                mod = residue.psi_mod
                self.accumulator.add_resource(mod.database_name, Qualifier.HAS_VERSION, mod.identifier)

    def _diagnose(self, entity: PhysicalEntity, message: str) -> None:
        diagnostic = Diagnostic(entity.st_id, entity.schema_name, message)
        self.diagnostics.append(diagnostic)
        logger.warning("%s (%s): %s", diagnostic.st_id, diagnostic.schema_class, message)
