"""
Error and warning emoji definitions.

Usage:
    >>> from shared.reporter.emojis.errors_emojis import ErrorEmoji
    >>> print(f"{ErrorEmoji.CRITICAL} Translation API unreachable")
    🔴 Translation API unreachable
"""

from shared.reporter.emojis.base_emojis import ComponentEmoji


class ErrorEmoji(ComponentEmoji):
    """Error severities, validation failures and recovery paths."""

    # ============================================================
    # Severity Levels
    # ============================================================

    CRITICAL = "🔴"  # Unrecoverable failure
    ERROR = "❌"  # Operation failed
    WARNING = "⚠️"  # Potential issue

    # ============================================================
    # Recovery
    # ============================================================

    FALLBACK = "↩️"  # Fallback path taken
    TIMEOUT = "⏱️"  # Operation timed out

    # ============================================================
    # Validation
    # ============================================================

    VALIDATION_ERROR = "🚫"  # Payload rejected
    MISSING_DATA = "📭"  # Required field missing
    EXCEPTION = "💥"  # Unexpected exception
