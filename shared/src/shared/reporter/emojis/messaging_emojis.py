"""
Chat relay and translation emoji definitions.

Usage:
    >>> from shared.reporter.emojis.messaging_emojis import MessageEmoji
    >>> print(f"{MessageEmoji.DELIVERED} Message delivered")
    ✅ Message delivered
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class MessageEmoji(ComponentEmoji):
    """Private message routing and translation events."""

    # ============================================================
    # Routing
    # ============================================================

    SENT = "📤"  # Message accepted from sender
    DELIVERED = "✅"  # Message delivered to recipient
    DROPPED = "📭"  # Recipient offline
    FAILED = "❌"  # Delivery failed
    ACK = "📨"  # Acknowledgment sent to sender

    # ============================================================
    # Translation
    # ============================================================

    TRANSLATE = "🈯"  # Translation requested
    LANGUAGE = "🗣️"  # Language catalog
    QUOTA = "💳"  # Quota or billing exhausted
