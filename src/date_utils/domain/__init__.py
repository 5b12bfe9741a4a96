"""Domain layer — value types, calendar rules, and the error taxonomy.

This layer depends only on stdlib and pydantic.
It must never import from services or config.
"""
