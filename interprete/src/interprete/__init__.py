"""
Interprete - presence and delivery relay with a translation gateway.

Routes private messages between users connected over WebSocket and
translates text on demand through a chat-completion API.
"""

__version__ = "0.1.0"
