"""Error taxonomy shared by the store, the encoder and the pages.

None of these are fatal: pages catch them and show ``st.warning`` /
``st.error`` while navigation and filter state stay as they were.
"""


class NoteBoardError(Exception):
    """Base class for recoverable note-board failures."""


class StorageUnavailable(NoteBoardError):
    """The note store could not be read (callers fall back to seed data)."""


class StorageWriteFailed(NoteBoardError):
    """A create/delete could not be persisted; the cache must not change."""


class EncodingFailed(NoteBoardError):
    """An uploaded file could not be read into an inline payload."""
