"""
Emoji registry with centralized access to all emoji categories.

Usage:
    >>> from shared.reporter.emojis import Emoji
    >>> Emoji.SYSTEM.STARTUP
    '🚀'
    >>> Emoji.format("MESSAGE", "DELIVERED", "Message delivered")
    '✅ Message delivered'
"""

from typing import Dict, List, Type

from shared.reporter.emojis.base_emojis import ComponentEmoji
from shared.reporter.emojis.errors_emojis import ErrorEmoji
from shared.reporter.emojis.messaging_emojis import MessageEmoji
from shared.reporter.emojis.network_emojis import NetworkEmoji
from shared.reporter.emojis.system_emojis import SystemEmoji


class Emoji:
    """
    Central emoji registry.

    Categories:
        SYSTEM: Service lifecycle, presence, health
        NETWORK: WebSocket and HTTP transport
        MESSAGE: Routing and translation
        ERROR: Error levels and validation
    """

    # ============================================================
    # Emoji Categories
    # ============================================================

    SYSTEM = SystemEmoji
    NETWORK = NetworkEmoji
    MESSAGE = MessageEmoji
    ERROR = ErrorEmoji

    # ============================================================
    # Common Shortcuts
    # ============================================================

    SUCCESS = "✅"
    FAILURE = "❌"
    UNKNOWN = "❓"

    @classmethod
    def get_all_categories(cls) -> Dict[str, Type[ComponentEmoji]]:
        """Map category name to its emoji class."""
        return {
            name: value
            for name, value in vars(cls).items()
            if isinstance(value, type) and issubclass(value, ComponentEmoji)
        }

    @classmethod
    def get(cls, category: str, name: str, default: str = UNKNOWN) -> str:
        """
        Look up an emoji dynamically.

        Args:
            category: Category name (case-insensitive), e.g. "network"
            name: Emoji name (case-insensitive), e.g. "connected"
            default: Returned when category or name is unknown

        Returns:
            Emoji character or default
        """
        category_class = cls.get_all_categories().get(category.upper())
        if category_class is None:
            return default
        return category_class.get_all().get(name.upper(), default)

    @classmethod
    def format(cls, category: str, name: str, message: str) -> str:
        """
        Prefix a message with an emoji.

        Unknown emojis leave the message unchanged.
        """
        emoji = cls.get(category, name, default="")
        if not emoji:
            return message
        return f"{emoji} {message}"

    @classmethod
    def search(cls, keyword: str) -> Dict[str, List[str]]:
        """Find emoji names containing keyword, grouped by category."""
        keyword = keyword.upper()
        results: Dict[str, List[str]] = {}
        for category, category_class in cls.get_all_categories().items():
            matches = [n for n in category_class.list_names() if keyword in n]
            if matches:
                results[category] = matches
        return results

    @classmethod
    def count_total(cls) -> int:
        """Total number of emojis across categories."""
        return sum(
            len(category_class.get_all())
            for category_class in cls.get_all_categories().values()
        )
