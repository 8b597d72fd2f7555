"""
Configuration for jsonpoke document transformation.

This module defines how documents are decoded, encoded and serialized
around the operation pipeline.
"""

import codecs
import logging
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class OutputSettings:
    """Serialization settings for transformed documents."""
    pretty_printing: bool = False
    indent: int = 2
    html_escaping: bool = True
    ensure_ascii: bool = False


@dataclass
class InputSettings:
    """Decoding settings for documents and operation values."""
    in_encoding: str = "utf-8"
    out_encoding: str = "utf-8"
    file_prefix: str = "@"


@dataclass
class PatchConfig:
    """Configuration options for jsonpoke."""

    output: Optional[OutputSettings] = None
    input: Optional[InputSettings] = None
    logger: Optional[logging.Logger] = None

    def __init__(
        self,
        *,
        output: Optional[OutputSettings] = None,
        input: Optional[InputSettings] = None,  # pylint: disable=redefined-builtin
        logger: Optional[logging.Logger] = None,
        **flat_options: Any,
    ):
        if output is not None:
            self.output = output
        else:
            self.output = OutputSettings(
                pretty_printing=flat_options.pop("pretty_printing", False),
                indent=flat_options.pop("indent", 2),
                html_escaping=flat_options.pop("html_escaping", True),
                ensure_ascii=flat_options.pop("ensure_ascii", False),
            )

        if input is not None:
            self.input = input
        else:
            self.input = InputSettings(
                in_encoding=flat_options.pop("in_encoding", "utf-8"),
                out_encoding=flat_options.pop("out_encoding", "utf-8"),
                file_prefix=flat_options.pop("file_prefix", "@"),
            )

        if flat_options:
            raise TypeError(f"Unknown configuration options: {', '.join(sorted(flat_options))}")

        self.logger = logger
        self.__post_init__()

    def __post_init__(self) -> None:
        assert self.output is not None and self.input is not None
        if self.output.indent < 0:
            raise ValueError("indent must not be negative")
        for encoding in (self.input.in_encoding, self.input.out_encoding):
            try:
                codecs.lookup(encoding)
            except LookupError as e:
                raise ValueError(f"Unknown encoding: {encoding}") from e

    # Flat accessors
    @property
    def pretty_printing(self) -> bool:
        """Whether to wrap and indent objects and arrays."""
        assert self.output is not None
        return self.output.pretty_printing

    @pretty_printing.setter
    def pretty_printing(self, value: bool) -> None:
        assert self.output is not None
        self.output.pretty_printing = value

    @property
    def indent(self) -> int:
        """Indent width used when pretty printing."""
        assert self.output is not None
        return self.output.indent

    @property
    def html_escaping(self) -> bool:
        """Whether to escape HTML-sensitive characters in the output."""
        assert self.output is not None
        return self.output.html_escaping

    @html_escaping.setter
    def html_escaping(self, value: bool) -> None:
        assert self.output is not None
        self.output.html_escaping = value

    @property
    def ensure_ascii(self) -> bool:
        """Whether to escape all non-ASCII characters in the output."""
        assert self.output is not None
        return self.output.ensure_ascii

    @property
    def in_encoding(self) -> str:
        """Encoding of input documents and value files."""
        assert self.input is not None
        return self.input.in_encoding

    @property
    def out_encoding(self) -> str:
        """Encoding of output documents."""
        assert self.input is not None
        return self.input.out_encoding

    @property
    def file_prefix(self) -> str:
        """Prefix that marks an operation value as a file name."""
        assert self.input is not None
        return self.input.file_prefix

    def get_logger(self, name: str) -> logging.Logger:
        """Return the configured logger, or the logger called ``name``."""
        return self.logger or logging.getLogger(name)

    @classmethod
    def compact(cls) -> "PatchConfig":
        """Create a configuration producing single-line output."""
        return cls()

    @classmethod
    def pretty(cls) -> "PatchConfig":
        """Create a configuration producing wrapped and indented output."""
        return cls(output=OutputSettings(pretty_printing=True))
