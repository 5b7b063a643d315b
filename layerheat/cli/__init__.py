"""Layerheat CLI — Typer-based command-line interface.

Provides the ``layerheat`` command with subcommands for inspecting,
summarising, normalising and checking heatmap files.

All output uses Rich for formatted terminal display.
"""
