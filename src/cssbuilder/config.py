from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BuildConfig:
    part_separator: str = "="  # between category and value in CLI tokens
    log_level: str = "WARNING"
