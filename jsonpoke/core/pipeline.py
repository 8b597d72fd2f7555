"""
Operation pipeline for applying a sequence of modifications to documents.

Operations are registered once and then applied, in registration order, to
every document transformed. The pipeline itself is never modified by a
transformation, so one pipeline can serve any number of documents.
"""

from collections.abc import Iterator
from typing import Any, Optional, TextIO

from ..utils.config import PatchConfig
from .engine import dumps, load, loads
from .operations import (
    InsertOperation,
    Operation,
    RemoveMode,
    RemoveOperation,
    SetMode,
    SetOperation,
)


class JsonPatch:
    """Manages a sequence of operations applied to JSON documents."""

    def __init__(
        self,
        operations: Optional[list[Operation]] = None,
        config: Optional[PatchConfig] = None,
    ):
        self.operations: list[Operation] = list(operations or [])
        self.config = config or PatchConfig()
        self.logger = self.config.get_logger(__name__)

    def add_operation(self, operation: Operation) -> None:
        """Append an operation to the pipeline."""
        self.logger.debug("Registered operation: %s", operation)
        self.operations.append(operation)

    def add_set(self, spec: str, value: Any, mode: SetMode = SetMode.ANY) -> None:
        """Register adding or changing one array element or object member."""
        self.add_operation(SetOperation(spec, value, mode))

    def add_remove(self, spec: str, mode: RemoveMode = RemoveMode.ANY) -> None:
        """Register removing one array element or object member."""
        self.add_operation(RemoveOperation(spec, mode))

    def add_insert(self, spec: str, value: Any) -> None:
        """Register inserting an element into an array."""
        self.add_operation(InsertOperation(spec, value))

    def apply(self, document: Any) -> Any:
        """Apply all operations in order and return the resulting document."""
        result = document
        for operation in self.operations:
            self.logger.debug("Applying %s", operation)
            result = operation.apply(result)
        return result

    def transform(self, reader: TextIO, writer: TextIO) -> None:
        """Read one document from ``reader``, modify it and write it to ``writer``."""
        document = load(reader)
        writer.write(dumps(self.apply(document), self.config))

    def transform_text(self, text: str) -> str:
        """Modify a document given as JSON text."""
        return dumps(self.apply(loads(text)), self.config)

    def transform_bytes(self, data: bytes) -> bytes:
        """Modify an encoded document, using the configured in/out encodings."""
        text = data.decode(self.config.in_encoding)
        return self.transform_text(text).encode(self.config.out_encoding)

    def describe(self) -> list[str]:
        """Human-readable descriptions of the registered operations."""
        return [str(operation) for operation in self.operations]

    def __len__(self) -> int:
        return len(self.operations)

    def __iter__(self) -> Iterator[Operation]:
        return iter(self.operations)
