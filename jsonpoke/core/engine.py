"""
JSON text boundary for jsonpoke - turns text into documents and back.

Parsing and serialization are delegated to the standard ``json`` module;
this module only adds error conversion, output formatting options and the
"literal document or @file" convention used for operation values.
"""

import json
from typing import Any, Optional, TextIO

from ..utils.config import PatchConfig
from .exceptions import DocumentError

# Characters escaped in output strings when HTML escaping is enabled
HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "=": "\\u003d",
    "'": "\\u0027",
}


def loads(text: str) -> Any:
    """Parse a JSON document from a string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentError(e.msg, line=e.lineno, column=e.colno) from e


def load(fp: TextIO) -> Any:
    """Parse a JSON document from a text stream."""
    return loads(fp.read())


def dumps(value: Any, config: Optional[PatchConfig] = None) -> str:
    """Serialize a document according to the output settings of ``config``."""
    if config is None:
        config = PatchConfig()

    if config.pretty_printing:
        text = json.dumps(
            value,
            indent=config.indent,
            separators=(",", ": "),
            ensure_ascii=config.ensure_ascii,
        )
    else:
        text = json.dumps(value, separators=(",", ":"), ensure_ascii=config.ensure_ascii)

    if config.html_escaping:
        # Outside of strings, serialized JSON never contains these characters
        for char, escape in HTML_ESCAPES.items():
            text = text.replace(char, escape)
    return text


def dump(value: Any, fp: TextIO, config: Optional[PatchConfig] = None) -> None:
    """Serialize a document to a text stream."""
    fp.write(dumps(value, config))


def load_value(document_or_file: str, config: Optional[PatchConfig] = None) -> Any:
    """
    Parse an operation value.

    Without the file prefix (``@`` by default) the argument itself is the JSON
    document; with it, the rest of the argument names a file whose contents
    are parsed, decoded with the configured input encoding.
    """
    if config is None:
        config = PatchConfig()

    prefix = config.file_prefix
    if prefix and document_or_file.startswith(prefix):
        path = document_or_file[len(prefix):]
        config.get_logger(__name__).debug("Reading value from %s", path)
        with open(path, encoding=config.in_encoding) as f:
            return load(f)

    return loads(document_or_file)
