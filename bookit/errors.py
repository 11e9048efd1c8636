"""
Error taxonomy for bookit.

Every error the CLI reports derives from BookitError; the CLI prints the
message on stderr and exits nonzero.
"""


class BookitError(Exception):
    """Base class for all bookit errors."""
    pass


class NotFoundError(BookitError):
    """A store file or a named bookmark is missing."""
    pass


class StoreNotFoundError(NotFoundError):
    """The store file does not exist or cannot be read."""
    pass


class BookmarkNotFoundError(NotFoundError):
    """No bookmark with the requested name."""
    pass


class AlreadyExistsError(BookitError):
    """Something with the same identity is already present."""
    pass


class BookmarkExistsError(AlreadyExistsError):
    """A bookmark with the same name exists and force was not given."""
    pass


class StoreExistsError(AlreadyExistsError):
    """A file already exists where a new store should be created."""
    pass


class ParseError(BookitError):
    """Content failed validation."""
    pass


class StoreParseError(ParseError):
    """The store file does not match the expected schema."""
    pass


class MalformedURLError(ParseError):
    """A bookmark URL has no scheme://host prefix."""
    pass


class StoreIOError(BookitError):
    """Writing the store file failed."""
    pass


class InvalidBookmarkError(BookitError):
    """A bookmark was given an empty name or url."""
    pass


class EditorError(BookitError):
    """The edit command could not be built, launched or failed."""
    pass


class SettingsError(BookitError):
    """A settings file or setting value is invalid."""
    pass
