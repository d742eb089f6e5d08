"""Exception types raised at the mdindex library boundary"""


class MdIndexError(Exception):
    """Base class for recoverable mdindex errors."""


class UnknownItemTypeError(MdIndexError):
    """Raised when a source filename matches none of the item type markers.

    The fully populated item is attached so callers can decide to keep it.
    """

    def __init__(self, path: str, item=None):
        super().__init__(f"The item {path!r} does not match any of the known item types.")
        self.path = path
        self.item = item


class BlockNameError(ValueError):
    """Raised when a block is created without a name."""
