"""Configuration models for the checkboxes server."""
from __future__ import annotations

import enum
from dataclasses import dataclass, replace


class LogLevel(str, enum.Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


@dataclass(frozen=True)
class ServerConfig:
    """Settings for one server process.

    capacity: number of flags in the shared vector (fixed for the process)
    demo_count: checkboxes drawn by the demo page, clamped to capacity
    poll_interval_ms: how often the demo page refetches ``/state``
    """
    host: str = "127.0.0.1"
    port: int = 8080
    capacity: int = 1_000_000
    demo_count: int = 100
    poll_interval_ms: int = 5000
    log_level: LogLevel = LogLevel.INFO

    def validate(self) -> ServerConfig:
        if self.capacity < 0:
            raise ValueError(f"capacity must be non-negative: {self.capacity}")
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")
        if self.demo_count < 0:
            raise ValueError(f"demo_count must be non-negative: {self.demo_count}")
        if self.poll_interval_ms <= 0:
            raise ValueError(f"poll_interval_ms must be positive: {self.poll_interval_ms}")
        try:
            level = LogLevel(str(getattr(self.log_level, "value", self.log_level)).upper())
        except ValueError:
            raise ValueError(f"unknown log level: {self.log_level}") from None
        return replace(self, log_level=level)
