"""Typed exceptions and error handling decorator."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from rich.console import Console

F = TypeVar("F", bound=Callable[..., Any])

err_console = Console(stderr=True)


class PortfolioCLIError(Exception):
    """Base exception for portfolio-cli."""

    exit_code: int = 1


class SiteConnectionError(PortfolioCLIError):
    """Cannot reach the portfolio site."""

    exit_code = 2


class RequestFailedError(PortfolioCLIError):
    """The site answered with a non-success status.

    Every status is treated the same way; ``status_code`` and ``detail``
    are kept for logging only.
    """

    exit_code = 3

    def __init__(self, status_code: int, detail: str = "") -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"Site returned {status_code}: {detail}")


class ConfigurationError(PortfolioCLIError):
    """No usable site configuration."""

    exit_code = 4


class FormValidationError(PortfolioCLIError):
    """A project draft failed field validation."""

    exit_code = 5

    def __init__(self, field_errors: dict[str, str] | None = None) -> None:
        self.field_errors = dict(field_errors or {})
        if self.field_errors:
            parts = [f"{name}: {msg}" for name, msg in self.field_errors.items()]
            message = "Invalid project: " + "; ".join(parts)
        else:
            message = "Invalid project"
        super().__init__(message)


def error_handler(func: F) -> F:
    """Decorator that catches PortfolioCLIError and prints user-friendly messages."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except PortfolioCLIError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(exc.exit_code)
        except ValueError as exc:
            err_console.print(f"[bold red]Error:[/] {exc}")
            raise SystemExit(1)

    return wrapper  # type: ignore[return-value]
