"""Domain layer — tag model, registration, and error types.

This layer depends only on stdlib and pydantic.
It must never import from the resolver, projection, or config modules.
"""
