"""Pytest configuration and fixtures.

Provides factories for the domain objects the annotation engine consumes
and a fresh output node per test.
"""

from pathlib import Path

import pytest

from sbml_annot.annotation import AnnotatedNode, AnnotationAccumulator, IdentifierResolver
from sbml_annot.model import (
    EntityWithAccessionedSequence,
    PsiMod,
    ReferenceEntity,
    SimpleEntity,
    TranslationalModification,
)

DATA_DIR = Path(__file__).parent / "data"

IDENTIFIERS = "http://identifiers.org"


@pytest.fixture
def data_dir() -> Path:
    """Directory holding JSON fixtures."""
    return DATA_DIR


@pytest.fixture
def node() -> AnnotatedNode:
    """Empty output node."""
    return AnnotatedNode("test_node")


@pytest.fixture
def accumulator() -> AnnotationAccumulator:
    """Accumulator with the default identifiers.org resolver."""
    return AnnotationAccumulator(IdentifierResolver(IDENTIFIERS, ["embl"]))


@pytest.fixture
def make_protein():
    """Factory for UniProt-referenced sequence entities."""

    def _make(accession: str, st_id: str | None = None, **kwargs) -> EntityWithAccessionedSequence:
        return EntityWithAccessionedSequence(
            st_id=st_id or f"R-HSA-{accession}",
            reference_entity=ReferenceEntity(database_name="UniProt", identifier=accession),
            **kwargs,
        )

    return _make


@pytest.fixture
def make_molecule():
    """Factory for ChEBI-referenced simple entities."""

    def _make(identifier: str, st_id: str | None = None, **kwargs) -> SimpleEntity:
        return SimpleEntity(
            st_id=st_id or f"R-ALL-{identifier}",
            reference_entity=ReferenceEntity(database_name="ChEBI", identifier=identifier),
            **kwargs,
        )

    return _make


@pytest.fixture
def phosphorylation() -> TranslationalModification:
    """O-phospho-L-serine residue."""
    return TranslationalModification(
        coordinate=15,
        psi_mod=PsiMod(database_name="MOD", identifier="00046"),
    )
