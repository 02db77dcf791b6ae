"""Subcommand modules for mealctl.

Provides register_commands() which uses deferred imports to keep
``mealctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``plan`` group and the standalone commands on the root group."""
    from mealctl.commands.plan import plan

    cli.add_command(plan)

    from mealctl.commands.config_cmd import config_cmd
    from mealctl.commands.init_cmd import init_cmd
    from mealctl.commands.upgrade import upgrade

    cli.add_command(init_cmd)
    cli.add_command(upgrade)
    cli.add_command(config_cmd)
