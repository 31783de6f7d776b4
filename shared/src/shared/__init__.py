"""
Shared utilities for Interprete services: reporter, health, test base.
"""
