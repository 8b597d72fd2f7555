"""
jsonpoke Core.

This module provides spec resolution and the document operations.
"""

from .operations import (
    InsertOperation,
    RemoveMode,
    RemoveOperation,
    SetMode,
    SetOperation,
    insert_value,
    remove_value,
    set_value,
)
from .pipeline import JsonPatch
from .spec import ArrayElement, ArrayStep, ObjectMember, ObjectStep

__all__ = [
    'set_value', 'remove_value', 'insert_value',
    'SetMode', 'RemoveMode',
    'SetOperation', 'RemoveOperation', 'InsertOperation',
    'JsonPatch',
    'ObjectStep', 'ArrayStep', 'ObjectMember', 'ArrayElement',
]
