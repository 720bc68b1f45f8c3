"""Domain layer — roadmap vertex, arc, and technology models.

This layer depends only on stdlib and pydantic.
It must never import from graph, services, or config.
"""
