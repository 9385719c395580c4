"""
Application layer.

Use cases orchestrate domain entities and depend only on repository
protocols, never on infrastructure.
"""
