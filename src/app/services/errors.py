"""
Store-level exceptions raised by repository adapters.

These are infrastructure failures, distinct from the business errors that
use cases return through Result.
"""


class StoreUnavailableError(Exception):
    """The backing store could not be reached or failed mid-operation"""


class DuplicateRecordError(Exception):
    """A unique constraint rejected the write"""
