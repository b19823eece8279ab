#!/usr/bin/env python3
"""Write (or, with --check, verify) docs/exit_codes.md from gobake.errors.EXIT_CODES."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

REPO = Path(__file__).resolve().parents[1]
DOC = REPO / "docs" / "exit_codes.md"


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description=__doc__)
    p.add_argument("--check", action="store_true", help="Fail if the doc is stale; write nothing")
    ns = p.parse_args(argv)

    sys.path.insert(0, str(REPO / "src"))
    from gobake.errors import render_exit_codes_markdown  # noqa: E402

    want = render_exit_codes_markdown()
    have = DOC.read_text(encoding="utf-8") if DOC.is_file() else None

    if ns.check:
        if have != want:
            print(f"[gobake] {DOC} is stale; run scripts/gen_exit_codes_md.py", file=sys.stderr)
            return 1
        return 0

    if have == want:
        return 0
    DOC.parent.mkdir(parents=True, exist_ok=True)
    DOC.write_text(want, encoding="utf-8")
    print(f"[gobake] wrote {DOC}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
