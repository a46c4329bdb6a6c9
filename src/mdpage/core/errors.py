"""Error taxonomy surfaced by the conversion pipeline and CLI"""


class MdPageError(Exception):
    """Base class for every terminal mdpage error."""


class UsageError(MdPageError):
    """Wrong number of command-line arguments."""


class InvalidExtensionError(MdPageError):
    """Input path does not carry the .md suffix."""


class MissingSourceError(MdPageError):
    """Input path does not exist."""


class ProcessingError(MdPageError):
    """Read, convert, assemble, or write failed; wraps the underlying cause."""
