"""
Path spec scanner and resolver for jsonpoke.

A spec addresses one location inside a JSON document::

    spec        := step*
    step        := '.' name          (name is [A-Za-z0-9_]+)
                 | '[' ']'           (append marker, last step only)
                 | '[' int ']'       (int is -?[0-9]+, negative counts from the end)

Intermediate steps navigate strictly. The last step is not navigated into;
it becomes the mutation site handed to a set/remove/insert operation.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from .error_handling import syntax_error, type_mismatch, wrap_with_spec
from .exceptions import IndexOutOfRangeError, JsonPokeError

OBJECT_STEP = re.compile(r"\.([A-Za-z0-9_]+)")
APPEND_STEP = re.compile(r"\[\]")
INDEX_STEP = re.compile(r"\[(-?[0-9]+)\]")


@dataclass(frozen=True)
class ObjectStep:
    """Selects an object member by name."""

    name: str
    offset: int
    end: int
    final: bool = False

    def __str__(self) -> str:
        return f".{self.name}"


@dataclass(frozen=True)
class ArrayStep:
    """Selects an array element; ``index is None`` is the append marker."""

    index: Optional[int]
    offset: int
    end: int
    final: bool = False

    @property
    def is_append(self) -> bool:
        return self.index is None

    def resolve_index(self, length: int) -> int:
        """Normalize against the array length at the time the step is evaluated."""
        if self.index is None:
            return length
        if self.index < 0:
            return self.index + length
        return self.index

    def __str__(self) -> str:
        return "[]" if self.index is None else f"[{self.index}]"


PathStep = Union[ObjectStep, ArrayStep]


@dataclass(frozen=True)
class ObjectMember:
    """Mutation site: a member (present or not) of a live object."""

    container: dict[str, Any]
    name: str

    @property
    def exists(self) -> bool:
        return self.name in self.container


@dataclass(frozen=True)
class ArrayElement:
    """Mutation site: a position in a live array, ``len(container)`` meaning append."""

    container: list[Any]
    index: int

    @property
    def exists(self) -> bool:
        return 0 <= self.index < len(self.container)

    @property
    def is_append(self) -> bool:
        return self.index == len(self.container)


MutationSite = Union[ObjectMember, ArrayElement]


def iter_steps(spec: str) -> Iterator[PathStep]:
    """
    Scan ``spec`` left to right, yielding one step at a time.

    Scanning is lazy: a syntax error is raised only when the scanner reaches
    the text it cannot match, so problems in earlier steps surface first.
    """
    pos = 0
    length = len(spec)
    while pos < length:
        m = OBJECT_STEP.match(spec, pos)
        if m:
            yield ObjectStep(m.group(1), pos, m.end(), m.end() == length)
            pos = m.end()
            continue

        m = APPEND_STEP.match(spec, pos)
        if m and m.end() == length:
            yield ArrayStep(None, pos, m.end(), True)
            pos = m.end()
            continue

        m = INDEX_STEP.match(spec, pos)
        if m:
            yield ArrayStep(int(m.group(1)), pos, m.end(), m.end() == length)
            pos = m.end()
            continue

        raise wrap_with_spec(syntax_error(spec[pos:]), spec, pos)


def parse_spec(spec: str) -> list[PathStep]:
    """Scan a whole spec; the empty spec yields no steps."""
    return list(iter_steps(spec))


def process_spec(
    root: Any, spec: str, handler: Optional[Callable[[MutationSite], Any]] = None
) -> Any:
    """
    Walk ``root`` along ``spec`` and hand the final mutation site to ``handler``.

    The handler runs inside the error context of the final step, so anything
    it raises is reported against the spec position it concerns. Returns the
    handler's result, or the site itself when no handler is given.
    """
    current = root
    for step in iter_steps(spec):
        try:
            if isinstance(step, ObjectStep):
                if not isinstance(current, dict):
                    raise type_mismatch("object", current)
                if step.final:
                    site: MutationSite = ObjectMember(current, step.name)
                    return handler(site) if handler else site
                # A missing member yields null; the next step reports it
                current = current.get(step.name)
            else:
                if not isinstance(current, list):
                    raise type_mismatch("array", current)
                index = step.resolve_index(len(current))
                if step.final:
                    if index < 0:
                        raise IndexOutOfRangeError(
                            f"Array index {step.index} is out of range for array of size {len(current)}"
                        )
                    site = ArrayElement(current, index)
                    return handler(site) if handler else site
                if not 0 <= index < len(current):
                    raise IndexOutOfRangeError(
                        f"Array index {step.index} is out of range for array of size {len(current)}"
                    )
                current = current[index]
        except JsonPokeError as exc:
            wrapped = wrap_with_spec(exc, spec, step.offset)
            if wrapped is exc:
                raise
            raise wrapped from exc

    # Only the empty spec gets here
    raise wrap_with_spec(syntax_error(spec), spec, 0)


def resolve(root: Any, spec: str) -> MutationSite:
    """Resolve ``spec`` against ``root`` without mutating anything."""
    return process_spec(root, spec)
