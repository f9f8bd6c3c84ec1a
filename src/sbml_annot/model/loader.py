"""
JSON loading for domain objects.

Accepts the shape produced by the Reactome content service
(``/data/query/enhanced/{id}``) with nested objects expanded.
"""

import json
from pathlib import Path
from typing import Any

from sbml_annot.model.base import DatabaseObject, load_object


def load_json(path: Path) -> DatabaseObject:
    """
    Load one domain object from a JSON file.

    Args:
        path: File holding a single JSON object with a ``schemaClass`` key

    Returns:
        The most specific model for the object's schema class
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    return loads(data)


def loads(data: str | bytes | dict[str, Any]) -> DatabaseObject:
    """Load one domain object from a JSON string or an already parsed dict."""
    if isinstance(data, (str, bytes)):
        data = json.loads(data)
    return load_object(data)
