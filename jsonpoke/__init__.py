"""
jsonpoke - modify JSON documents at locations named by compact path specs.

A spec names one location inside a document: ``.name`` selects an object
member, ``[3]`` an array element, ``[-1]`` the last element and ``[]`` the
position after the last element. Three operations act on that location:

- set: add or change a member or element (optionally requiring that it
  already exists, or that it does not)
- remove: delete a member or element
- insert: insert an element into an array, shifting the rest

Quick Start:
    import jsonpoke

    patch = jsonpoke.JsonPatch()
    patch.add_set(".version", "2.0", jsonpoke.SetMode.EXISTING)
    patch.add_insert(".authors[0]", "Alice")
    patch.add_remove(".legacy")
    print(patch.transform_text('{"version": "1.0", "authors": [], "legacy": 1}'))

    # One-off modifications of an already parsed document
    doc = jsonpoke.set_value({"a": [1, 2]}, ".a[]", 3)
"""

from .core.engine import dump, dumps, load, load_value, loads
from .core.exceptions import (
    DocumentError,
    IndexOutOfRangeError,
    JsonPokeError,
    PreconditionFailedError,
    SpecSyntaxError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from .core.operations import (
    InsertOperation,
    RemoveMode,
    RemoveOperation,
    SetMode,
    SetOperation,
    insert_value,
    remove_value,
    set_value,
)
from .core.pipeline import JsonPatch
from .utils.config import InputSettings, OutputSettings, PatchConfig

__version__ = "0.1.0"
__author__ = "jsonpoke contributors"

__all__ = [
    # Pipeline
    "JsonPatch",
    # Document operations
    "set_value", "remove_value", "insert_value", "SetMode", "RemoveMode",
    "SetOperation", "RemoveOperation", "InsertOperation",
    # JSON text boundary
    "loads", "load", "dumps", "dump", "load_value",
    # Configuration classes
    "PatchConfig", "OutputSettings", "InputSettings",
    # Exception classes
    "JsonPokeError", "SpecSyntaxError", "TypeMismatchError", "IndexOutOfRangeError",
    "PreconditionFailedError", "UnsupportedOperationError", "DocumentError",
]
