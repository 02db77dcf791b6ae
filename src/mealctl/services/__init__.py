"""Service layer — use-case orchestration over the meal plan aggregate.

Services may import from domain and infrastructure layers.
They must never import from commands or output.
"""
