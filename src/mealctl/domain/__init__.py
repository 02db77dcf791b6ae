"""Domain layer — meal-plan aggregate, outcome type, and ports.

This layer depends only on the stdlib.
It must never import from services, infrastructure, commands, or config.
"""
