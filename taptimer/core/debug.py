# taptimer/core/debug.py
# Failure reporting through the registered output manager

from .output import LogCategory, get_output_manager


# * Record an exception w/ optional context; visible in verbose & debug output
def debug_error(error: Exception, context: str = "") -> None:
    error_msg = f"Exception: {type(error).__name__}: {str(error)}"
    if context:
        error_msg = f"{context} - {error_msg}"
    manager = get_output_manager()
    manager.verbose(error_msg, LogCategory.ERROR)
    manager.debug(repr(error), LogCategory.ERROR)
