# src/schema_forge/errors.py

"""Error taxonomy for schema-forge.

Model failures are split in two classes:
- ModelTimeoutError: transient, retried by RetryingModelClient
- PermanentModelError: anything else, raised on the first occurrence

Soft misses (unparsable table name, missing code block, no statements at all)
are not exceptions. They are logged and the affected unit is skipped.
"""

from typing import Any


class ModelError(Exception):
    """Base class for failed model invocations.

    `payload` carries the structured error body returned by the provider,
    when there is one.
    """

    def __init__(self, message: str, *, payload: Any = None) -> None:
        super().__init__(message)
        self.payload = payload


class ModelTimeoutError(ModelError):
    """A model call exceeded its wall-clock budget."""


class PermanentModelError(ModelError):
    """A model call failed for a reason retrying will not fix."""


class PayloadTooLargeError(PermanentModelError):
    """The serialized request body exceeds the transport ceiling."""


class EmptyDocumentError(ValueError):
    """The input document has no text at all."""
