"""Entry point wrapper ensuring all CLI errors produce structured JSON.

Intercepts Click/Typer UsageErrors and unexpected exceptions and formats
them as JSON on stdout, keeping the output contract machine-readable.
Tracebacks for unexpected exceptions still go to stderr.
"""

import json
import re
import sys
import traceback

import click


def main() -> None:
    """Run the CLI app with structured error handling."""
    from xlsx_keys.cli import app

    try:
        app(standalone_mode=False)
    except click.UsageError as e:
        _handle_usage_error(e)
    except SystemExit:
        raise
    except click.Abort:
        raise SystemExit(1)
    except Exception as e:
        _handle_internal_error(e)


def _handle_usage_error(error: click.UsageError) -> None:
    """Format a Click UsageError as structured JSON with helpful suggestions."""
    message = error.format_message()
    suggestions: list[str] = []

    # A candidate or formula starting with "-" is parsed as an option
    if re.search(r"No such option: -", message):
        suggestions = [
            "Arguments starting with '-' are parsed as flags by the shell",
            "Use the -- sentinel: xlsx-keys check -- -my-key",
        ]

    result = {"error": True, "code": "CLI_USAGE_ERROR", "message": message}
    if suggestions:
        result["suggestions"] = suggestions
    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    raise SystemExit(2)


def _handle_internal_error(error: Exception) -> None:
    """Report an unexpected exception as JSON, keeping the traceback on stderr."""
    traceback.print_exc(file=sys.stderr)
    result = {
        "error": True,
        "code": "INTERNAL_ERROR",
        "exception_type": type(error).__name__,
        "message": str(error),
    }
    json.dump(result, sys.stdout, indent=2)
    sys.stdout.write("\n")
    raise SystemExit(1)


if __name__ == "__main__":
    main()
