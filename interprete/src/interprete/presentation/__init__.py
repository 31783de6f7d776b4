"""Presentation layer: HTTP and WebSocket API."""
