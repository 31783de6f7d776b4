"""
Service lifecycle emoji definitions.
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class SystemEmoji(ComponentEmoji):
    """Startup, shutdown, configuration and health events."""

    # ============================================================
    # Lifecycle
    # ============================================================
    STARTUP = "🚀"  # Service starting
    SHUTDOWN = "🛑"  # Service stopping
    READY = "✅"  # Component ready
    CONFIG = "⚙️"  # Configuration loaded

    # ============================================================
    # Presence
    # ============================================================
    REGISTER = "📝"  # Identity registered
    UNREGISTER = "📤"  # Identity removed

    # ============================================================
    # Health
    # ============================================================
    HEARTBEAT = "❤️"  # Keepalive ping
    HEALTH_CHECK = "🩺"  # Health check performed
    CLEANUP = "🧹"  # Resource cleanup
