#!/usr/bin/env python3
"""
cli.py
------
Shared CLI helpers and statistics for Quire commands.

Functions:
    setup_logger: Initialize a QuireLogger for CLI operations

Classes:
    OperationStats: Base class for command statistics
    ThemeBuildStats: Statistics for theme resolution and materialization

Usage:
    from quire.core.cli import setup_logger, ThemeBuildStats

    logger = setup_logger(log_dir, "themes")
    stats = ThemeBuildStats()
    stats.entries_resolved += 1
    print(stats.summary())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional

# --- Local imports ---
from quire.core.logging_manager import QuireLogger


# ═══════════════════════════════════════════════════════════════════════════
# LOGGER SETUP
# ═══════════════════════════════════════════════════════════════════════════

def setup_logger(log_dir: Path, component_name: str) -> QuireLogger:
    """
    Setup logging for CLI operations.

    Creates ``<log_dir>/operations`` if needed and returns a logger for
    the given component.

    Args:
        log_dir: Base log directory (typically paths.LOG_DIR)
        component_name: Component identifier for logging (e.g. 'themes')

    Returns:
        Configured QuireLogger instance
    """
    operations_log_dir = Path(log_dir) / "operations"
    operations_log_dir.mkdir(parents=True, exist_ok=True)
    return QuireLogger(operations_log_dir, component_name=component_name)


# ═══════════════════════════════════════════════════════════════════════════
# STATISTICS CLASSES
# ═══════════════════════════════════════════════════════════════════════════

@dataclass
class OperationStats:
    """
    Base class for CLI operation statistics.

    Attributes:
        errors: Number of errors encountered
        start_time: Operation start timestamp
    """
    errors: int = 0
    start_time: datetime = field(default_factory=datetime.now)
    _duration_cached: Optional[float] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        if self.errors < 0:
            raise ValueError(f"errors must be non-negative, got {self.errors}")

    def duration(self) -> float:
        """Elapsed seconds since start_time, cached after the first call."""
        if self._duration_cached is None:
            self._duration_cached = (datetime.now() - self.start_time).total_seconds()
        return self._duration_cached

    def summary(self) -> str:
        return f"{self.errors} errors, {self.duration():.2f}s"

    def to_dict(self) -> Dict[str, Any]:
        return {"errors": self.errors, "duration": self.duration()}


@dataclass
class ThemeBuildStats(OperationStats):
    """
    Statistics for a theme build.

    Attributes:
        entries_resolved: Documents (including the table of contents) whose
            theme list was resolved
        themes_registered: Distinct themes in the registry
        themes_materialized: Themes whose copy step wrote to the workspace
        themes_cloned: Per-entry package theme clones created
    """
    entries_resolved: int = 0
    themes_registered: int = 0
    themes_materialized: int = 0
    themes_cloned: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        for name in (
            "entries_resolved",
            "themes_registered",
            "themes_materialized",
            "themes_cloned",
        ):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    def summary(self) -> str:
        """Get formatted summary with theme metrics."""
        parts = [
            f"{self.entries_resolved} entries resolved",
            f"{self.themes_registered} themes registered",
            f"{self.themes_materialized} materialized",
        ]
        if self.themes_cloned:
            parts.append(f"{self.themes_cloned} cloned")
        parts.append(f"{self.errors} errors")
        parts.append(f"{self.duration():.2f}s")
        return ", ".join(parts)

    def to_dict(self) -> Dict[str, Any]:
        d = super().to_dict()
        d.update({
            "entries_resolved": self.entries_resolved,
            "themes_registered": self.themes_registered,
            "themes_materialized": self.themes_materialized,
            "themes_cloned": self.themes_cloned,
        })
        return d
