"""Tests for the qualifier → resources accumulator."""

import pytest

from sbml_annot.annotation import AnnotationTerm, Qualifier


class TestAnnotationAccumulator:
    """Tests for AnnotationAccumulator."""

    def test_insertion_order_preserved(self, accumulator):
        """Test resources keep the order they were added in."""
        accumulator.add(Qualifier.HAS_PART, "urn:c")
        accumulator.add(Qualifier.HAS_PART, "urn:a")
        accumulator.add(Qualifier.HAS_PART, "urn:b")
        terms = accumulator.emit()
        assert terms == [AnnotationTerm(Qualifier.HAS_PART, ("urn:c", "urn:a", "urn:b"))]

    def test_one_term_per_qualifier(self, accumulator):
        """Test interleaved qualifiers are grouped."""
        accumulator.add(Qualifier.IS, "urn:1")
        accumulator.add(Qualifier.IS_DESCRIBED_BY, "urn:2")
        accumulator.add(Qualifier.IS, "urn:3")
        terms = {t.qualifier: t.resources for t in accumulator.emit()}
        assert terms == {
            Qualifier.IS: ("urn:1", "urn:3"),
            Qualifier.IS_DESCRIBED_BY: ("urn:2",),
        }

    def test_duplicates_kept(self, accumulator):
        """Test identical resources are not merged."""
        accumulator.add(Qualifier.IS, "urn:1")
        accumulator.add(Qualifier.IS, "urn:1")
        assert accumulator.resources(Qualifier.IS) == ("urn:1", "urn:1")

    def test_none_is_ignored(self, accumulator):
        """Test a suppressed resolution adds nothing and creates no key."""
        accumulator.add(Qualifier.IS, None)
        assert len(accumulator) == 0
        assert accumulator.emit() == []

    def test_add_resource_resolves(self, accumulator):
        """Test add_resource goes through the resolver."""
        accumulator.add_resource("ChEBI", Qualifier.IS, "15377")
        accumulator.add_resource("EMBL", Qualifier.IS, "X01234")
        assert accumulator.resources(Qualifier.IS) == ("http://identifiers.org/chebi/CHEBI:15377",)

    def test_emit_empty(self, accumulator):
        """Test nothing added emits no terms."""
        assert accumulator.emit() == []

    def test_finalized_after_emit(self, accumulator):
        """Test the accumulator cannot be reused after emitting."""
        accumulator.add(Qualifier.IS, "urn:1")
        accumulator.emit()
        with pytest.raises(RuntimeError):
            accumulator.add(Qualifier.IS, "urn:2")
        with pytest.raises(RuntimeError):
            accumulator.emit()


class TestAnnotationTerm:
    """Tests for AnnotationTerm."""

    def test_to_dict(self):
        """Test JSON conversion uses qualifier names."""
        term = AnnotationTerm(Qualifier.IS_HOMOLOG_TO, ("urn:a",))
        assert term.to_dict() == {"qualifier": "isHomologTo", "resources": ["urn:a"]}

    def test_qualifier_uri(self):
        """Test full BioModels qualifier URI."""
        assert Qualifier.OCCURS_IN.uri == "http://biomodels.net/biology-qualifiers/occursIn"
