"""
Connection and transport emoji definitions.

Usage:
    >>> from shared.reporter.emojis.network_emojis import NetworkEmoji
    >>> print(f"{NetworkEmoji.CONNECTED} WebSocket connected")
    🔗 WebSocket connected
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class NetworkEmoji(ComponentEmoji):
    """WebSocket and HTTP transport events."""

    # ============================================================
    # Connection States
    # ============================================================

    CONNECTED = "🔗"  # Connection established
    DISCONNECTED = "⚠️"  # Connection closed
    CONNECTING = "⏳"  # Handshake in progress
    TIMEOUT = "⏱️"  # Request or receive timeout

    # ============================================================
    # Data Flow
    # ============================================================

    SEND = "📤"  # Frame sent
    RECEIVE = "📥"  # Frame received

    # ============================================================
    # Protocols
    # ============================================================

    WEBSOCKET = "🌐"  # WebSocket operation
    HTTP = "🔌"  # Outbound HTTP call
