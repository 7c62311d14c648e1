# taptimer/cli/decorators.py
# CLI decorator rendering taptimer errors as a single red line w/ exit code 1

import functools
from typing import Any, Callable, TypeVar, cast

import typer

from ..core.exceptions import (
    TapTimerError,
    JSONParsingError,
    DocumentError,
    FileOperationError,
    format_error_message,
)

F = TypeVar("F", bound=Callable[..., Any])


# * Decorator for handling taptimer errors in CLI commands w/ Rich output
def handle_taptimer_error(func: F) -> F:
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        # ! Lazy import to avoid circular dependencies
        from ..vault_io.console import console

        try:
            return func(*args, **kwargs)
        except JSONParsingError as e:
            console.print(format_error_message("JSON Parsing Error", str(e)))
            raise SystemExit(1)
        except DocumentError as e:
            console.print(format_error_message("Document Error", str(e)))
            raise SystemExit(1)
        except FileOperationError as e:
            console.print(format_error_message("File Error", str(e)))
            raise SystemExit(1)
        except TapTimerError as e:
            console.print(format_error_message("Error", str(e)))
            raise SystemExit(1)
        except (typer.Exit, typer.Abort):
            raise
        except Exception as e:
            console.print(format_error_message("Unexpected Error", str(e)))
            raise SystemExit(1)

    return cast(F, wrapper)
