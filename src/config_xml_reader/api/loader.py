"""Document loading API.

This module reads a whole document, joins its lines into one flat string and
hands it to the node parser. Line breaks are dropped rather than replaced, so
no text can appear between tags and whitespace handling stays limited to
spaces and tabs.

Every function either returns a complete tree or raises; there is no partial
result.
"""

import re
import time
from pathlib import Path
from typing import Iterable, Optional, Tuple, Union

from config_xml_reader.character import CursorBuffer
from config_xml_reader.shared import (
    LoadStatistics,
    ReaderConfig,
    XmlReadError,
    get_logger,
)
from config_xml_reader.tokenization import eat_declaration
from config_xml_reader.tree import NodeParser, XmlFileNode

PathLike = Union[str, Path]

MS_PER_SECOND = 1000

# Only the terminators a text-mode file read recognises
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")


def join_lines(lines: Iterable[str]) -> str:
    """Concatenate lines with their line terminators removed."""
    return "".join(line.rstrip("\r\n") for line in lines)


def read_document(file_path: PathLike, encoding: str = "utf-8") -> str:
    """Read a file and return its content as a single line.

    Raises:
        FileNotFoundError: the file does not exist
        UnicodeDecodeError: the file is not valid in ``encoding``
    """
    path_obj = Path(file_path)
    with path_obj.open(encoding=encoding) as file:
        return join_lines(file)


def load(file_path: PathLike, config: Optional[ReaderConfig] = None) -> XmlFileNode:
    """Load a markup file into a tree.

    Args:
        file_path: Path to the file
        config: Reader configuration (defaults apply when omitted)

    Returns:
        The root node

    Raises:
        XmlReadError: the document is malformed
        OSError: the file cannot be read

    Examples:
        >>> root = load("web.config")
        >>> root.name
        'configuration'
    """
    root, _ = load_with_statistics(file_path, config)
    return root


def load_with_statistics(
    file_path: PathLike,
    config: Optional[ReaderConfig] = None
) -> Tuple[XmlFileNode, LoadStatistics]:
    """Load a markup file and report statistics about the resulting tree."""
    config = config or ReaderConfig()
    logger = get_logger(__name__, config.correlation_id, "load")

    logger.info(
        "Starting file load",
        extra={"file_path": str(file_path), "encoding": config.encoding}
    )
    text = read_document(file_path, config.encoding)
    return _parse_text(text, config, source=str(file_path))


def load_string(text: str, config: Optional[ReaderConfig] = None) -> XmlFileNode:
    """Load markup held in a string.

    Line breaks in ``text`` are removed exactly as they are for files.

    Examples:
        >>> load_string('<a x="1"><b/></a>').to_markup()
        '<a x="1"><b/></a>'
    """
    return load_lines(LINE_BREAK_PATTERN.split(text), config)


def load_lines(lines: Iterable[str], config: Optional[ReaderConfig] = None) -> XmlFileNode:
    """Load markup supplied as an iterable of lines."""
    root, _ = _parse_text(join_lines(lines), config or ReaderConfig(), source="<string>")
    return root


def _parse_text(
    text: str,
    config: ReaderConfig,
    source: str
) -> Tuple[XmlFileNode, LoadStatistics]:
    start_time = time.time()
    logger = get_logger(__name__, config.correlation_id, "parse")

    buffer = CursorBuffer(text, config.whitespace)
    try:
        if config.allow_declaration and eat_declaration(buffer):
            logger.debug(
                "Skipped declaration", extra={"source": source, "position": buffer.position}
            )
        root = NodeParser(buffer, config).parse_root()
    except XmlReadError as e:
        logger.error(
            "Document is malformed",
            extra={
                "source": source,
                "error": e.message,
                "position": e.position,
                "expected": e.expected,
            }
        )
        raise

    nodes = list(root.iter_nodes())
    statistics = LoadStatistics(
        node_count=len(nodes),
        attribute_count=sum(len(node.attributes) for node in nodes),
        max_depth=root.depth(),
        characters_processed=len(text),
        processing_time_ms=(time.time() - start_time) * MS_PER_SECOND,
    )

    logger.info(
        "Document loaded",
        extra={
            "source": source,
            "root": root.name,
            "node_count": statistics.node_count,
            "processing_time_ms": statistics.processing_time_ms,
        }
    )
    return root, statistics
