"""Command line interface."""

from __future__ import annotations

from monoreleaser.cli.app import app, main

__all__ = ["app", "main"]
