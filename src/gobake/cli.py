"""gobake CLI.

This is the stable CLI entrypoint (console-script: ``gobake``).

    gobake [options] [file]

Reads from stdin if file is omitted. Typical use is a go:generate line:

    //go:generate gobake -decl var -type []byte -output logo.go logo.png

Option precedence: explicit CLI flag > --spec value > built-in default.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import TypeVar

from gobake import __version__
from gobake.bake_spec import BakeSpecV1, load_bake_spec
from gobake.core.literal import DEFAULT_WRAP
from gobake.engine.generate import generate, make_compressor
from gobake.errors import EXIT_GENERIC, EXIT_OK, GobakeError, UsageError
from gobake.files import default_name, read_input, write_output
from gobake.go_package import resolve_package

T = TypeVar("T")


def _pick(cli_value: T | None, spec_value: T | None, default: T) -> T:
    if cli_value is not None:
        return cli_value
    if spec_value is not None:
        return spec_value
    return default


def build_parser() -> argparse.ArgumentParser:
    # Single-dash long flags are accepted too, matching go:generate habits.
    p = argparse.ArgumentParser(
        prog="gobake",
        description="Bake a file into Go source as a const, var or accessor func.",
        epilog="Reads from stdin if file is omitted.",
    )
    p.add_argument("file", nargs="?", type=Path, default=None, help="Input file ('-' for stdin)")
    p.add_argument(
        "-decl",
        "--decl",
        default=None,
        help='How to declare the value. Can be "func", "const", or "var" (default: func).',
    )
    p.add_argument(
        "-compress",
        "--compress",
        default=None,
        help='How to compress the value. Can be "" (none), "gzip", or "zstd".',
    )
    p.add_argument(
        "-export",
        "--export",
        action="store_true",
        default=None,
        help="Whether the declaration should be exported.",
    )
    p.add_argument(
        "-import",
        "--import",
        dest="import_",
        default=None,
        help="An optional package to import. Usually combined with -type.",
    )
    p.add_argument(
        "-name",
        "--name",
        default=None,
        help="The name of the declared value. Defaults to the name of the input file.",
    )
    p.add_argument(
        "-output",
        "--output",
        type=Path,
        default=None,
        help="The name of the generated file. Writes to stdout if empty.",
    )
    p.add_argument(
        "-package",
        "--package",
        default=None,
        help='The name of the package. Determined by output location if empty, or "main" if all else fails.',
    )
    p.add_argument(
        "-type",
        "--type",
        default=None,
        help='The type of the declared value (var only). Must be convertible to a string. Default: "string".',
    )
    p.add_argument(
        "--level",
        type=int,
        default=None,
        help=(
            "Compression level (gzip: 0..9, default 6; zstd: 1..22, default 3). "
            "An error when no compression is selected."
        ),
    )
    p.add_argument(
        "--wrap",
        type=int,
        default=None,
        help="Bytes per literal line (default: 16, 0 = single line).",
    )
    p.add_argument(
        "--checked",
        action="store_true",
        default=None,
        help="func only: return (io.ReadCloser, error) instead of dropping decoder errors.",
    )
    p.add_argument(
        "--spec",
        default=None,
        help="Bake spec (JSON). Use '@file.json' to load from file, or pass JSON inline.",
    )
    p.add_argument("--debug", action="store_true", help="Show stack traces on errors")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def _bake(ns: argparse.Namespace, argv: list[str]) -> int:
    spec = load_bake_spec(ns.spec) if ns.spec is not None else BakeSpecV1()

    compress_id = _pick(ns.compress, spec.compress, "")
    level = _pick(ns.level, spec.level, None)
    try:
        compressor = make_compressor(compress_id, level)
    except ValueError as e:
        raise UsageError(str(e)) from e

    wrap = _pick(ns.wrap, spec.wrap, DEFAULT_WRAP)
    if wrap < 0:
        raise UsageError("--wrap must be >= 0")

    value = read_input(ns.file)
    name = _pick(ns.name, spec.name, None) or default_name(ns.file)
    package = resolve_package(ns.output, _pick(ns.package, spec.package, None))

    text = generate(
        value,
        name=name,
        typ=_pick(ns.type, spec.type, "string"),
        compress=compressor,
        decl=_pick(ns.decl, spec.decl, "func"),
        export=bool(_pick(ns.export, spec.export, False)),
        extra_import=_pick(ns.import_, spec.import_, None) or None,
        package=package,
        args=argv,
        checked=bool(_pick(ns.checked, spec.checked, False)),
        wrap=wrap,
    )
    write_output(text, ns.output)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    p = build_parser()
    ns = p.parse_args(argv)

    try:
        return _bake(ns, argv)
    except SystemExit:
        raise
    except GobakeError as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[gobake] {e}", file=sys.stderr)
        return int(getattr(e, "exit_code", EXIT_GENERIC) or EXIT_GENERIC)
    except Exception as e:
        if getattr(ns, "debug", False):
            raise
        print(f"[gobake] error: {e}", file=sys.stderr)
        return EXIT_GENERIC


if __name__ == "__main__":
    raise SystemExit(main())
