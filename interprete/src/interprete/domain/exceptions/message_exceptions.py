"""
Message-related exceptions.
"""

SENDER_RECEIVER_REQUIRED = "Sender and receiver IDs are required"
USER_ID_REQUIRED = "User ID is required"
SENDER_MISMATCH = "Sender ID does not match authenticated user"


class MessageError(Exception):
    """Base exception for relay message errors."""

    pass


class InvalidMessageError(MessageError, ValueError):
    """Raised when an inbound message fails validation."""

    def __init__(self, reason: str):
        """
        Initialize InvalidMessageError.

        Args:
            reason: Human-readable reason, sent back to the client as-is
        """
        super().__init__(reason)
        self.reason = reason
