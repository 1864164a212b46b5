"""Error types shared by the store adapters and the response layer.

Only store-level failures get a dedicated type. "Not found" is not an
exception inside the service: point lookups return `None` and scans return an
empty list, and `responses.py` decides what that means for the HTTP status.
"""


class StoreError(Exception):
    """The document store could not serve a read.

    Raised by every `DocumentStore` backend in place of the driver's own
    exception (the original is chained as `__cause__`). The message is meant for
    logs only and is never sent to API clients.
    """

    def __init__(self, message: str, collection: str | None = None):
        super().__init__(message)
        self.collection = collection


class DocumentFormatError(StoreError):
    """A stored value has a shape the service cannot read, such as a timestamp
    whose `seconds` is not a number."""
