"""Reading shapes from the plain-text shape file format.

The first line holds the number of shapes; each following line describes one
shape as ``Type height parameter``, for example::

    3
    Cylinder 9431.453 4450.123
    Cone 674.2435 652.1234
    OctagonalPrism 22.1 9.87

Lines that cannot be parsed are logged and skipped so that one bad record
does not discard a large file.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List, Optional, Union

from .errors import InvalidShapeError, ShapeFileError
from .shapes import Shape, ShapeKind

logger = logging.getLogger(__name__)


def parse_shape(line: str) -> Optional[Shape]:
    """Parse one ``Type height parameter`` line.

    Returns ``None`` (after logging a warning) for malformed lines.
    """
    parts = line.split()
    if len(parts) < 3:
        logger.warning(f"Invalid shape data (expected 3 parts): {line!r}")
        return None

    try:
        height = float(parts[1])
        parameter = float(parts[2])
    except ValueError:
        logger.warning(f"Invalid numeric values in line: {line!r}")
        return None

    try:
        return Shape(ShapeKind.parse(parts[0]), height, parameter)
    except InvalidShapeError as e:
        logger.warning(f"Skipping line {line!r}: {e}")
        return None


def parse_shapes(lines: Iterable[str]) -> List[Shape]:
    """Parse the count line and the shape lines that follow it."""
    iterator = iter(lines)
    count_line = next(iterator, None)
    if count_line is None:
        logger.error("Shape file is empty")
        return []

    try:
        count = int(count_line.strip())
    except ValueError:
        logger.error(f"Invalid shape count: {count_line.strip()!r}")
        return []
    if count < 0:
        logger.error(f"Shape count cannot be negative: {count}")
        return []

    shapes: List[Shape] = []
    for index in range(count):
        line = next(iterator, None)
        if line is None:
            logger.warning(
                f"Expected {count} shapes but reached end of file after {index}"
            )
            break
        if not line.strip():
            logger.warning(f"Empty shape line {index + 2} skipped")
            continue
        shape = parse_shape(line)
        if shape is not None:
            shapes.append(shape)

    logger.info(f"Loaded {len(shapes)} out of {count} expected shapes")
    return shapes


def load_shapes(path: Union[str, Path]) -> List[Shape]:
    """Load every valid shape from the file at ``path``.

    Raises:
        ShapeFileError: the file does not exist, cannot be read or is not
            UTF-8 text
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            return parse_shapes(f)
    except OSError as e:
        raise ShapeFileError(f"Error reading file '{path}': {e}") from e
    except UnicodeDecodeError as e:
        raise ShapeFileError(f"File '{path}' is not valid UTF-8 text: {e}") from e
