"""Input supplier and output sink.

Both ends are read/written once, fully in memory. File output is
all-or-nothing: the text goes to a temporary sibling first and is moved
over the destination with os.replace, so an aborted run never leaves a
truncated .go file that looks valid.
"""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path
from typing import BinaryIO

from gobake.errors import InputError, OutputError

STDIN_NAME = "stdin"


def read_input(path: Path | None, stdin: BinaryIO | None = None) -> bytes:
    """Read the whole payload from ``path``, or from stdin when path is None/'-'."""
    if path is None or str(path) == "-":
        src = stdin if stdin is not None else sys.stdin.buffer
        try:
            return src.read()
        except OSError as e:
            raise InputError(f"read stdin: {e}") from e
    try:
        return Path(path).read_bytes()
    except OSError as e:
        raise InputError(f"read file: {e}") from e


def default_name(path: Path | None) -> str:
    """Base name minus its last extension; 'stdin' when reading stdin."""
    if path is None or str(path) == "-":
        return STDIN_NAME
    base = Path(path).name
    stem, dot, _ext = base.rpartition(".")
    return stem if dot else base


def write_output(text: str, path: Path | None, stdout: BinaryIO | None = None) -> None:
    data = text.encode("utf-8")
    if path is None:
        dst = stdout if stdout is not None else sys.stdout.buffer
        try:
            dst.write(data)
            dst.flush()
        except OSError as e:
            raise OutputError(f"write stdout: {e}") from e
        return

    target = Path(path)
    directory = target.parent
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=str(directory)
        )
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, 0o666 & ~_umask())
        os.replace(tmp_name, target)
        tmp_name = None
    except OSError as e:
        raise OutputError(f"write file: {e}") from e
    finally:
        if tmp_name is not None:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass


def _umask() -> int:
    # os has no getter; set and restore
    mask = os.umask(0)
    os.umask(mask)
    return mask
