"""monoreleaser - monorepo-aware release automation with git inside."""

from __future__ import annotations

__version__ = "0.1.0"
