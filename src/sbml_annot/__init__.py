"""
sbml_annot: cross-reference annotations for exported pathway models

Maps a Reactome-style entity graph onto MIRIAM-style annotation terms:

    Pathway / Reaction / PhysicalEntity / Compartment → (qualifier, [identifiers.org URIs])

Core constraints:
- Operates on already-loaded, in-memory domain objects (no database access)
- Never resolves the URIs it builds over the network
- Unknown entity classes degrade to a diagnostic, never an exception
"""

__version__ = "0.1.0"
