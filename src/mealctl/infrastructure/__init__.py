"""Infrastructure layer — database, migrations, repositories, ID sources.

This layer depends on stdlib and third-party libs (SQLAlchemy, Alembic).
It implements the ports declared in :mod:`mealctl.domain` and must never
import from services, commands, or output.
"""
