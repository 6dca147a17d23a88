"""Exception hierarchy for the topic tree.

All topic errors inherit from TopicError, which carries a message
attribute for logging and for callers that surface errors to users.
"""


class TopicError(Exception):
    """Base exception for all topic errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class UnknownTopicError(TopicError, LookupError):
    """Raised when a sub-topic key is not registered on its owner.

    Happens either when activating a topic or when rehydrating one whose
    persisted key no longer has a factory.
    """

    def __init__(self, key: str, owner: str) -> None:
        super().__init__(f"No sub-topic registered under '{key}' on {owner}")
        self.key = key
        self.owner = owner
