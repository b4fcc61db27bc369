"""
Storage integrity errors.

Repositories translate their driver's constraint violations into these so the
application layer never depends on the storage engine.
"""


class ReferentialIntegrityError(Exception):
    """A write referenced a row that does not exist (e.g. an unknown owner)."""

    def __init__(self, message: str = "Referenced record does not exist"):
        super().__init__(message)
        self.message = message


class ChatAlreadyExistsError(Exception):
    """A chat for this unordered pair of users is already stored."""

    def __init__(self, pair_key: str):
        super().__init__(f"Chat already exists for pair {pair_key}")
        self.pair_key = pair_key
