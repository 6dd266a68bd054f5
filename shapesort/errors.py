"""Exception types raised by shapesort."""


class ShapeSortError(Exception):
    """Base class for all shapesort errors."""


class InvalidInputError(ShapeSortError, ValueError):
    """Raised when a sort receives a missing sequence or comparator."""


class UnknownAlgorithmError(ShapeSortError, ValueError):
    """Raised when an algorithm identifier cannot be resolved."""

    def __init__(self, name, valid_names):
        self.name = name
        self.valid_names = list(valid_names)
        super().__init__(
            f"Unsupported algorithm: {name!r}. "
            f"Supported identifiers: {', '.join(self.valid_names)}"
        )


class InvalidShapeError(ShapeSortError, ValueError):
    """Raised for unknown shape kinds or non-positive dimensions."""


class ShapeFileError(ShapeSortError, OSError):
    """Raised when a shape file cannot be read."""
