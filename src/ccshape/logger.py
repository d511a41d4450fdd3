"""
logger.py - Structured Logging for ccshape
==========================================
Records geometry and rasterization events as structured entries.

Features:
    - Component-tagged entries with attached data
    - Timed steps
    - Console (plain or JSON) and append-only file output
    - Quiet by default: entries are kept in memory only
"""

import json
import time
from collections import deque
from contextlib import contextmanager
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Deque, Dict, List, Optional

from ccshape.config import LOG_VERBOSE


class LogLevel(Enum):
    """Component identifiers for structured logging."""
    GEOMETRY = "GEOMETRY"
    RASTER = "RASTER"
    ERROR = "ERROR"


@dataclass
class LogEntry:
    """Structured log entry with metadata."""
    timestamp: str
    level: str
    component: str
    message: str
    data: Dict[str, Any] = field(default_factory=dict)
    duration_ms: Optional[float] = None

    def to_dict(self) -> dict:
        return asdict(self)

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), default=str)


class ShapeLogger:
    """
    Central logger for shape operations.

    Usage:
        logger = ShapeLogger(verbose=True)
        logger.step(LogLevel.GEOMETRY, "Built shape", points=12)

        with logger.timed_step(LogLevel.RASTER, "Rasterizing"):
            image = shape.create_image()
    """

    COLORS = {
        LogLevel.GEOMETRY: "\033[0;34m",  # Blue
        LogLevel.RASTER: "\033[0;36m",    # Cyan
        LogLevel.ERROR: "\033[1;31m",     # Bold Red
    }
    RESET = "\033[0m"

    def __init__(
        self,
        verbose: bool = False,
        log_file: Optional[str] = None,
        json_log: bool = False,
        use_colors: bool = True,
        max_entries: Optional[int] = 1000,
    ):
        """
        Args:
            verbose: Print entries to console
            log_file: Path to an append-only log file (optional)
            json_log: Write entries as JSON lines
            use_colors: Use ANSI colors in console output
            max_entries: In-memory entries kept, oldest dropped first (None = unbounded)
        """
        self.verbose = verbose
        self.log_file = Path(log_file) if log_file else None
        self.json_log = json_log
        self.use_colors = use_colors

        self.entries: Deque[LogEntry] = deque(maxlen=max_entries)

        if self.log_file:
            self.log_file.parent.mkdir(parents=True, exist_ok=True)

    def _record(
        self,
        level: str,
        component: LogLevel,
        message: str,
        data: Dict[str, Any],
        duration_ms: Optional[float] = None,
    ) -> LogEntry:
        entry = LogEntry(
            timestamp=datetime.now().isoformat(),
            level=level,
            component=component.value,
            message=message,
            data=data,
            duration_ms=duration_ms,
        )
        self.entries.append(entry)

        if self.verbose:
            self._print_entry(entry, component)
        if self.log_file:
            self._write_to_file(entry)
        return entry

    def step(self, component: LogLevel, message: str, **data) -> LogEntry:
        """Log an informational event."""
        return self._record("INFO", component, message, data)

    def warning(self, component: LogLevel, message: str, **data) -> LogEntry:
        return self._record("WARNING", component, message, data)

    def error(
        self,
        component: LogLevel,
        message: str,
        exception: Optional[Exception] = None,
        **data,
    ) -> LogEntry:
        """Log an error, attaching the exception type and message if given."""
        if exception is not None:
            data["exception_type"] = type(exception).__name__
            data["exception_message"] = str(exception)
        return self._record("ERROR", component, message, data)

    @contextmanager
    def timed_step(self, component: LogLevel, message: str, **data):
        """
        Time the enclosed block and record one entry with its duration.

        Usage:
            with logger.timed_step(LogLevel.RASTER, "Rasterizing"):
                image = shape.create_image()
        """
        start_time = time.perf_counter()
        try:
            yield
        finally:
            duration_ms = (time.perf_counter() - start_time) * 1000
            self._record("INFO", component, message, data, duration_ms=duration_ms)

    def entries_for(self, component: LogLevel) -> List[LogEntry]:
        return [e for e in self.entries if e.component == component.value]

    def _print_entry(self, entry: LogEntry, component: LogLevel) -> None:
        if self.json_log:
            print(entry.to_json())
            return

        color = self.COLORS.get(component, "") if self.use_colors else ""
        reset = self.RESET if self.use_colors else ""
        component_tag = f"[{entry.component}]"
        suffix = f" ({entry.duration_ms:.1f}ms)" if entry.duration_ms is not None else ""
        print(f"{color}{component_tag:11} {entry.message}{suffix}{reset}")

        for key, value in entry.data.items():
            if not key.startswith("_"):
                print(f"  └─ {key}: {value}")

    def _write_to_file(self, entry: LogEntry) -> None:
        with open(self.log_file, "a", encoding="utf-8") as f:
            if self.json_log:
                f.write(entry.to_json() + "\n")
            else:
                f.write(f"[{entry.timestamp}] [{entry.level}] [{entry.component}] {entry.message}\n")
                if entry.data:
                    f.write(f"  Data: {json.dumps(entry.data, default=str)}\n")

    def clear(self) -> None:
        self.entries.clear()


_global_logger: Optional[ShapeLogger] = None


def get_logger() -> ShapeLogger:
    """Get or create the global logger instance."""
    global _global_logger
    if _global_logger is None:
        _global_logger = ShapeLogger(verbose=LOG_VERBOSE)
    return _global_logger


def set_logger(logger: Optional[ShapeLogger]) -> None:
    """Set the global logger instance; None resets it to a fresh default."""
    global _global_logger
    _global_logger = logger


__all__ = ["LogLevel", "LogEntry", "ShapeLogger", "get_logger", "set_logger"]
