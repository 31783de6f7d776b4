"""
Base class for emoji category collections.

Every category (SYSTEM, NETWORK, ...) is a plain class whose upper-case
string attributes are the emojis. Nothing is instantiated.
"""

from typing import Dict, List


class ComponentEmoji:
    """
    Base class for a semantic group of emojis.

    Example:
        >>> class GreetingEmoji(ComponentEmoji):
        ...     HELLO = "👋"
        >>> GreetingEmoji.get_all()
        {'HELLO': '👋'}
    """

    @classmethod
    def get_all(cls) -> Dict[str, str]:
        """Return every emoji defined on this category (name -> emoji)."""
        return {
            name: value
            for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        }

    @classmethod
    def list_names(cls) -> List[str]:
        """Return the sorted emoji constant names of this category."""
        return sorted(cls.get_all())
