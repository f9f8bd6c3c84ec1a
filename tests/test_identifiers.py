"""Tests for identifiers.org URI construction."""

import pytest

from sbml_annot.annotation import IdentifierResolver, resolve_identifier


class TestIdentifierResolver:
    """Tests for IdentifierResolver.resolve."""

    def test_default_form(self):
        """Test database-prefixed accession for ordinary databases."""
        assert resolve_identifier("chebi", "15377") == "http://identifiers.org/chebi/CHEBI:15377"

    def test_database_name_case(self):
        """Test path segment is lowercase and prefix uppercase whatever the input case."""
        assert resolve_identifier("ChEBI", "15377") == "http://identifiers.org/chebi/CHEBI:15377"
        assert resolve_identifier("DOID", "162") == "http://identifiers.org/doid/DOID:162"

    @pytest.mark.parametrize("db", ["uniprot", "UniProt", "UNIPROT"])
    def test_uniprot_has_no_prefix(self, db):
        """Test UniProt accessions are not namespaced."""
        assert resolve_identifier(db, "P12345") == "http://identifiers.org/uniprot/P12345"

    @pytest.mark.parametrize("db", ["embl", "EMBL", "Embl"])
    @pytest.mark.parametrize("accession", ["X01234", "", "AB000263.1"])
    def test_embl_is_suppressed(self, db, accession):
        """Test EMBL never yields a resource."""
        assert resolve_identifier(db, accession) is None

    def test_unknown_database_uses_default(self):
        """Test unrecognized databases still resolve."""
        assert resolve_identifier("MyDB", "abc") == "http://identifiers.org/mydb/MYDB:abc"

    def test_integer_accession(self):
        """Test numeric accessions such as PubMed ids."""
        assert resolve_identifier("pubmed", 8702645) == "http://identifiers.org/pubmed/PUBMED:8702645"

    def test_hyphenated_database(self):
        """Test EC codes keep the general rule."""
        assert resolve_identifier("ec-code", "1.1.1.1") == "http://identifiers.org/ec-code/EC-CODE:1.1.1.1"

    def test_custom_base_url(self):
        """Test a trailing slash on the base URL is dropped."""
        resolver = IdentifierResolver("https://identifiers.org/", [])
        assert resolver.resolve("go", "0005829") == "https://identifiers.org/go/GO:0005829"

    def test_custom_suppression_list(self):
        """Test suppression list replaces the default."""
        resolver = IdentifierResolver(suppressed=["Ensembl"])
        assert resolver("ensembl", "ENSG00000139618") is None
        assert resolver("embl", "X01234") == "http://identifiers.org/embl/EMBL:X01234"
