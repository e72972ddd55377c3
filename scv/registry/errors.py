"""Registry error taxonomy.

Every error is fatal to the call that raised it: the operation aborts
before touching state and the error propagates to the host.
"""

from __future__ import annotations


class RegistryError(Exception):
    """Base class for all registry failures."""

    default_message = "Registry error"

    def __init__(self, message: str = ""):
        self.message = message or self.default_message
        super().__init__(self.message)


class AlreadyInitialized(RegistryError):
    default_message = "Already initialized"


class NotInitialized(RegistryError):
    default_message = "Registry has not been initialized"


class DuplicateIdentifier(RegistryError):
    default_message = "Sorry, already added this item."


class NotFound(RegistryError):
    default_message = "Sorry, No item found"


class NotAuthorized(RegistryError):
    default_message = (
        "To reset all the items, this method must be called by the contract owner."
    )


class InvalidArgument(RegistryError):
    default_message = "Invalid argument"


class StoreError(RegistryError):
    default_message = "Registry state could not be read"
