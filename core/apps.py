"""App configuration for the puzzle runner Django app."""

from __future__ import annotations

from django.apps import AppConfig


class CoreConfig(AppConfig):
    """Configuration for the `core` app, home of the `solve_puzzle` command."""

    name = "core"
    verbose_name = "Puzzle runner"
