"""Domain layer — categories, records, lending rules.

This layer depends only on stdlib and pydantic.
It must never import from services, plugins, or config.
"""
