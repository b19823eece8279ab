"""Typed errors for gobake.

Single source of truth for exit codes lives here.

Policy:
- Errors are small and boring.
- Every fatal stage (read, compress, write) has its own error type, so the
  message and the exit code always name the failing stage.
- The CLI maps errors to stable exit codes (see EXIT_* constants).
- docs/exit_codes.md is generated from this module (scripts/gen_exit_codes_md.py).
"""

from __future__ import annotations

from dataclasses import dataclass

# -------------------------
# Exit codes (single source)
# -------------------------

EXIT_OK = 0
EXIT_USAGE = 2
EXIT_GENERIC = 10
EXIT_INPUT = 11
EXIT_COMPRESS = 12
EXIT_OUTPUT = 13


@dataclass(frozen=True, slots=True)
class ExitCodeInfo:
    code: int
    name: str
    description: str


EXIT_CODES: tuple[ExitCodeInfo, ...] = (
    ExitCodeInfo(EXIT_OK, "OK", "Success"),
    ExitCodeInfo(EXIT_USAGE, "USAGE", "Usage/config error (invalid args, invalid bake spec, empty identifier)"),
    ExitCodeInfo(EXIT_GENERIC, "GENERIC", "Generic failure (unexpected error)"),
    ExitCodeInfo(EXIT_INPUT, "INPUT", "Cannot read the input bytes (file or stdin)"),
    ExitCodeInfo(EXIT_COMPRESS, "COMPRESS", "In-memory compression failed"),
    ExitCodeInfo(EXIT_OUTPUT, "OUTPUT", "Cannot write the generated source (file or stdout)"),
)

# For convenience (fast lookup)
_EXIT_CODE_BY_CODE: dict[int, ExitCodeInfo] = {e.code: e for e in EXIT_CODES}


def exit_code_info(code: int) -> ExitCodeInfo | None:
    return _EXIT_CODE_BY_CODE.get(int(code))


def render_exit_codes_markdown() -> str:
    """Render docs/exit_codes.md content."""
    lines: list[str] = []
    lines.append("# Exit codes\n")
    lines.append("> GENERATED FILE, do not edit manually.\n")
    lines.append("> Source of truth: `src/gobake/errors.py` (EXIT_CODES).\n")
    lines.append("> Regenerate: `python scripts/gen_exit_codes_md.py`.\n\n")
    lines.append("These are the CLI exit codes you can rely on.\n\n")
    lines.append("| Code | Name | Meaning |\n")
    lines.append("|---:|---|---|\n")
    for e in sorted(EXIT_CODES, key=lambda x: x.code):
        lines.append(f"| {e.code} | `{e.name}` | {e.description} |\n")
    lines.append("\n## Notes\n")
    lines.append("- Every internal error extends `GobakeError` and carries an `exit_code`.\n")
    lines.append("- `--debug` re-raises errors to show full stack traces.\n")
    lines.append("- A failed run never leaves a partially written `--output` file behind.\n")
    return "".join(lines)


# ---------------
# Typed exceptions
# ---------------


class GobakeError(Exception):
    """Base error for gobake."""

    exit_code: int = EXIT_GENERIC


class UsageError(GobakeError):
    exit_code = EXIT_USAGE


class InputError(GobakeError):
    exit_code = EXIT_INPUT


class CompressionError(GobakeError):
    exit_code = EXIT_COMPRESS


class OutputError(GobakeError):
    exit_code = EXIT_OUTPUT
