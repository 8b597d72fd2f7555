"""
Set, remove and insert operations on JSON documents.

Each operation resolves its spec once and applies its mode checks to the
resulting mutation site. All of them return the (possibly new) root value.
"""

import copy
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .exceptions import (
    IndexOutOfRangeError,
    PreconditionFailedError,
    UnsupportedOperationError,
)
from .spec import ArrayElement, MutationSite, ObjectMember, process_spec


class SetMode(Enum):
    """Existence precondition for a set operation."""

    ANY = "any"  # Add or replace
    EXISTING = "existing"  # Target must exist and is replaced
    NON_EXISTING = "non_existing"  # Target must not exist and is created


class RemoveMode(Enum):
    """Existence precondition for removing an object member."""

    ANY = "any"  # A missing member is silently ignored
    EXISTING = "existing"  # A missing member is an error


def _out_of_range(site: ArrayElement, allowed: str) -> IndexOutOfRangeError:
    return IndexOutOfRangeError(
        f"Array index {site.index} is out of range {allowed} "
        f"for array of size {len(site.container)}"
    )


def set_value(root: Any, spec: str, value: Any, mode: SetMode = SetMode.ANY) -> Any:
    """
    Add or change one array element or object member.

    An empty spec replaces the whole document with ``value``. ``[]`` and
    ``[<size>]`` append to an array, negative indices count from the end.
    """
    if spec == "":
        return value

    def handle(site: MutationSite) -> None:
        if isinstance(site, ObjectMember):
            if mode is SetMode.EXISTING and not site.exists:
                raise PreconditionFailedError(f'Member "{site.name}" does not exist')
            if mode is SetMode.NON_EXISTING and site.exists:
                raise PreconditionFailedError(f'Member "{site.name}" already exists')
            site.container[site.name] = value
            return

        size = len(site.container)
        if mode is SetMode.EXISTING and not site.exists:
            raise _out_of_range(site, f"0...{size - 1}")
        if mode is SetMode.NON_EXISTING and not site.is_append:
            raise IndexOutOfRangeError(
                f"Array index {site.index} is not equal to array size {size}"
            )
        if site.index > size:
            raise _out_of_range(site, f"0...{size}")

        if site.is_append:
            site.container.append(value)
        else:
            site.container[site.index] = value

    process_spec(root, spec, handle)
    return root


def remove_value(root: Any, spec: str, mode: RemoveMode = RemoveMode.ANY) -> Any:
    """
    Remove one array element or object member.

    ``mode`` only matters for object members; array elements must exist.
    """

    def handle(site: MutationSite) -> None:
        if isinstance(site, ObjectMember):
            if site.exists:
                del site.container[site.name]
            elif mode is RemoveMode.EXISTING:
                raise PreconditionFailedError(f'Member "{site.name}" does not exist')
            return

        if not site.exists:
            raise _out_of_range(site, f"0...{len(site.container) - 1}")
        del site.container[site.index]

    process_spec(root, spec, handle)
    return root


def insert_value(root: Any, spec: str, value: Any) -> Any:
    """Insert ``value`` into an array before the element the spec designates."""

    def handle(site: MutationSite) -> None:
        if isinstance(site, ObjectMember):
            raise UnsupportedOperationError(
                "Cannot insert into an object member; use set instead"
            )
        if site.index > len(site.container):
            raise _out_of_range(site, f"0...{len(site.container)}")
        site.container.insert(site.index, value)

    process_spec(root, spec, handle)
    return root


def _describe_value(value: Any) -> str:
    text = json.dumps(value, ensure_ascii=False)
    return text if len(text) <= 40 else text[:37] + "..."


@dataclass(frozen=True)
class SetOperation:
    """A registered set operation; owns a private copy of its value."""

    spec: str
    value: Any
    mode: SetMode = SetMode.ANY

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", copy.deepcopy(self.value))

    def apply(self, root: Any) -> Any:
        return set_value(root, self.spec, copy.deepcopy(self.value), self.mode)

    def __str__(self) -> str:
        target = self.spec or "<document>"
        return f"set {target} = {_describe_value(self.value)} ({self.mode.value})"


@dataclass(frozen=True)
class RemoveOperation:
    """A registered remove operation."""

    spec: str
    mode: RemoveMode = RemoveMode.ANY

    def apply(self, root: Any) -> Any:
        return remove_value(root, self.spec, self.mode)

    def __str__(self) -> str:
        return f"remove {self.spec} ({self.mode.value})"


@dataclass(frozen=True)
class InsertOperation:
    """A registered insert operation; owns a private copy of its value."""

    spec: str
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", copy.deepcopy(self.value))

    def apply(self, root: Any) -> Any:
        return insert_value(root, self.spec, copy.deepcopy(self.value))

    def __str__(self) -> str:
        return f"insert {self.spec} = {_describe_value(self.value)}"


Operation = Union[SetOperation, RemoveOperation, InsertOperation]
