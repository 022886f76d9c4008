"""Configuration for proctop."""

import logging
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class MonitorConfig:
    """Settings for the refresh loop and the table."""

    proc_root: Path = field(default_factory=lambda: Path("/proc"))
    poll_rate: float = 2.0  # Seconds between refreshes
    capacity: int = 25  # Data rows in the table
    log_level: int = logging.WARNING

    def __post_init__(self) -> None:
        self.proc_root = Path(self.proc_root)
        if self.capacity < 0:
            raise ValueError(f"capacity must be >= 0, got {self.capacity}")
