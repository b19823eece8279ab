"""Run the layering check without pytest (e.g. in a pre-commit hook)."""

from __future__ import annotations

import importlib.util
import sys
from pathlib import Path


def main() -> int:
    repo_root = Path(__file__).resolve().parents[1]
    test_path = repo_root / "tests" / "test_arch_boundaries.py"
    spec = importlib.util.spec_from_file_location("gobake_arch_check", test_path)
    if spec is None or spec.loader is None:
        print(f"[gobake] cannot load {test_path}", file=sys.stderr)
        return 3

    mod = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(mod)
    violations = mod.layering_violations()
    for v in violations:
        print(v, file=sys.stderr)
    if violations:
        return 2
    print("[gobake] layering OK")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
