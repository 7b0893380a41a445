"""Output reporters for human-readable and machine-readable command results."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from typing import Dict, List

from rich.console import Console

REPORTER_MODES = ("chalk", "json")


class Reporter(ABC):
    """Collects status messages for a single command run."""

    @abstractmethod
    def log(self, message: str) -> None:
        """Record a plain progress message."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Record an informational message."""

    @abstractmethod
    def warn(self, message: str) -> None:
        """Record a warning."""

    @abstractmethod
    def error(self, message: str) -> None:
        """Record an error."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Record a success message."""

    @abstractmethod
    def format_output(self) -> str:
        """Return the combined report for the run."""

    @property
    def emits_document(self) -> bool:
        """True when ``format_output`` must be printed at the end of the run."""
        return False


class ConsoleReporter(Reporter):
    """Prints colored lines as messages arrive and keeps a plain-text log."""

    def __init__(self, console: Console | None = None, error_console: Console | None = None) -> None:
        self.console = console or Console(highlight=False)
        self.error_console = error_console or Console(stderr=True, highlight=False)
        self.output: List[str] = []

    def log(self, message: str) -> None:
        self.console.print(message, markup=False)
        self.output.append(message)

    def info(self, message: str) -> None:
        self.console.print(message, style="blue", markup=False)
        self.output.append(f"INFO: {message}")

    def warn(self, message: str) -> None:
        self.error_console.print(message, style="yellow", markup=False)
        self.output.append(f"WARNING: {message}")

    def error(self, message: str) -> None:
        self.error_console.print(message, style="red", markup=False)
        self.output.append(f"ERROR: {message}")

    def success(self, message: str) -> None:
        self.console.print(message, style="green", markup=False)
        self.output.append(f"SUCCESS: {message}")

    def format_output(self) -> str:
        return "\n".join(self.output)


class JsonReporter(Reporter):
    """Buckets messages by severity and serializes them on demand."""

    def __init__(self) -> None:
        self.output: Dict[str, List[str]] = {
            "logs": [],
            "errors": [],
            "successes": [],
            "warnings": [],
            "infos": [],
        }

    def log(self, message: str) -> None:
        self.output["logs"].append(message)

    def info(self, message: str) -> None:
        self.output["infos"].append(message)

    def warn(self, message: str) -> None:
        self.output["warnings"].append(message)

    def error(self, message: str) -> None:
        self.output["errors"].append(message)

    def success(self, message: str) -> None:
        self.output["successes"].append(message)

    def format_output(self) -> str:
        return json.dumps(self.output, indent=2)

    @property
    def emits_document(self) -> bool:
        return True


def create_reporter(mode: str) -> Reporter:
    """Return the reporter for ``mode`` (``chalk`` or ``json``)."""
    normalized = mode.strip().lower()
    if normalized == "json":
        return JsonReporter()
    if normalized == "chalk":
        return ConsoleReporter()
    raise ValueError(f"Unsupported output format: {mode}")


__all__ = [
    "ConsoleReporter",
    "JsonReporter",
    "REPORTER_MODES",
    "Reporter",
    "create_reporter",
]
