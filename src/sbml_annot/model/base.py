"""
Base domain objects and reference data.

Models mirror the Reactome graph / content-service JSON: camelCase keys and a
``schemaClass`` discriminator. Every model registers itself (and any Reactome
aliases) by schema class name so that polymorphic fields can be loaded into
the right subclass.
"""

from typing import Annotated, Any, ClassVar, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field
from pydantic.alias_generators import to_camel

_SCHEMA_CLASSES: dict[str, type["DatabaseObject"]] = {}

T = TypeVar("T", bound="DatabaseObject")


class DatabaseObject(BaseModel):
    """Root of every Reactome domain object."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Additional Reactome schema class names that map onto this model
    schema_aliases: ClassVar[tuple[str, ...]] = ()

    db_id: int | None = Field(default=None, description="Internal database identifier")
    st_id: str | None = Field(default=None, description="Stable identifier (e.g. R-HSA-123)")
    display_name: str | None = Field(default=None, description="Human readable name")
    schema_class: str | None = Field(default=None, description="Schema class as given by the source")

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs: Any) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        _SCHEMA_CLASSES[cls.__name__] = cls
        for alias in cls.__dict__.get("schema_aliases", ()):
            _SCHEMA_CLASSES[alias] = cls

    @property
    def schema_name(self) -> str:
        """Schema class given by the source, or the model class name."""
        return self.schema_class or type(self).__name__


def schema_class_for(name: str | None) -> type[DatabaseObject] | None:
    """Look up the model registered for a schema class name."""
    if name is None:
        return None
    return _SCHEMA_CLASSES.get(name)


def load_object(data: Any, base: type[T] = DatabaseObject) -> T:
    """
    Build the most specific model for a JSON object.

    An unknown ``schemaClass`` (or one that is not a subclass of ``base``)
    falls back to ``base``; the original name stays in ``schema_class``.

    Args:
        data: Parsed JSON object, or an already-built model
        base: Class the result must be an instance of

    Returns:
        Model instance
    """
    if isinstance(data, base):
        return data
    cls: type[DatabaseObject] = base
    if isinstance(data, dict):
        found = schema_class_for(data.get("schemaClass", data.get("schema_class")))
        if found is not None and issubclass(found, base):
            cls = found
    return cls.model_validate(data)


def polymorphic(base_name: str) -> BeforeValidator:
    """
    Field validator that loads nested objects by schema class.

    The base is looked up by name at validation time so fields may refer to
    classes defined later (or to their own class).
    """

    def _load(value: Any) -> Any:
        base = _SCHEMA_CLASSES[base_name]
        if value is None:
            return None
        if isinstance(value, (list, tuple)):
            return [load_object(item, base) for item in value]
        return load_object(value, base)

    return BeforeValidator(_load)


# ---------------------------------------------------------------------------
# Reference data
# ---------------------------------------------------------------------------


class ReferenceEntity(DatabaseObject):
    """External database record a physical entity refers to (ChEBI, UniProt, ...)."""

    schema_aliases = (
        "ReferenceMolecule",
        "ReferenceGeneProduct",
        "ReferenceIsoform",
        "ReferenceDNASequence",
        "ReferenceRNASequence",
        "ReferenceTherapeutic",
    )

    database_name: str
    identifier: str


class DatabaseIdentifier(DatabaseObject):
    """Generic cross-reference (e.g. a KEGG COMPOUND entry)."""

    database_name: str
    identifier: str


class Disease(DatabaseObject):
    """Disease ontology term."""

    database_name: str = "DOID"
    identifier: str


class Publication(DatabaseObject):
    """Any publication. Only literature references carry a resolvable id."""

    schema_aliases = ("Book", "URL")

    title: str | None = None


class LiteratureReference(Publication):
    """Journal article indexed by PubMed."""

    pubmed_identifier: int | None = Field(default=None, alias="pubMedIdentifier")
    journal: str | None = None
    year: int | None = None


class GOTerm(DatabaseObject):
    """Gene Ontology term; ``accession`` is given without the ``GO:`` prefix."""

    accession: str
    database_name: str = "GO"


class GOBiologicalProcess(GOTerm):
    schema_aliases = ("GO_BiologicalProcess",)


class GOMolecularFunction(GOTerm):
    schema_aliases = ("GO_MolecularFunction",)


class Compartment(GOTerm):
    schema_aliases = ("GO_CellularComponent", "EntityCompartment")


class CatalystActivity(DatabaseObject):
    """Catalytic activity of a reaction; EC number is optional."""

    activity: GOMolecularFunction | None = None
    ec_number: str | None = None


class PsiMod(DatabaseObject):
    """PSI-MOD protein modification term."""

    database_name: str = "MOD"
    identifier: str


class AbstractModifiedResidue(DatabaseObject):
    """Any residue modification on a sequence entity."""

    schema_aliases = (
        "GeneticallyModifiedResidue",
        "FragmentModification",
        "FragmentInsertionModification",
        "FragmentDeletionModification",
        "FragmentReplacedModification",
        "ReplacedResidue",
    )

    coordinate: int | None = None


class TranslationalModification(AbstractModifiedResidue):
    """Post-translational modification; may carry a PSI-MOD term."""

    schema_aliases = (
        "ModifiedResidue",
        "GroupModifiedResidue",
        "CrosslinkedResidue",
        "IntraChainCrosslinkedResidue",
        "InterChainCrosslinkedResidue",
    )

    psi_mod: PsiMod | None = None


PublicationList = Annotated[list[Publication], polymorphic("Publication")]
