"""
Annotation qualifiers and traversal levels.
"""

from enum import Enum

BIOLOGY_QUALIFIERS = "http://biomodels.net/biology-qualifiers/"


class Qualifier(str, Enum):
    """BioModels biology qualifier linking an element to an external resource."""

    IS = "is"
    IS_DESCRIBED_BY = "isDescribedBy"
    HAS_PART = "hasPart"
    OCCURS_IN = "occursIn"
    HAS_INSTANCE = "hasInstance"
    IS_HOMOLOG_TO = "isHomologTo"
    HAS_VERSION = "hasVersion"

    @property
    def uri(self) -> str:
        """Full qualifier URI."""
        return f"{BIOLOGY_QUALIFIERS}{self.value}"


class Level(Enum):
    """Where an entity sits relative to the species being annotated."""

    TOP_LEVEL = "top_level"  # the species itself
    NESTED = "nested"  # component, member or repeated unit of it
