from __future__ import annotations

import gzip
import json
import re
import subprocess
import sys
from pathlib import Path


def _run_cli(
    *args: str, cwd: Path | None = None, stdin: bytes | None = None
) -> subprocess.CompletedProcess[bytes]:
    """Run gobake CLI through a python -c wrapper.

    This avoids assuming the console-script entrypoint is installed.
    """
    cmd = [
        sys.executable,
        "-c",
        "from gobake.cli import main; raise SystemExit(main())",
        *args,
    ]
    return subprocess.run(
        cmd,
        cwd=str(cwd) if cwd else None,
        input=stdin if stdin is not None else b"",
        capture_output=True,
    )


def _literal_bytes(src: str) -> bytes:
    chunks = re.findall(r'"((?:\\x[0-9a-f]{2})*)"', src)
    return b"".join(bytes.fromhex(c.replace("\\x", "")) for c in chunks)


def test_cli_file_to_stdout_defaults(tmp_path: Path) -> None:
    inp = tmp_path / "hi.txt"
    inp.write_bytes(b"hi")

    r = _run_cli(str(inp))
    assert r.returncode == 0, (r.stdout, r.stderr)
    out = r.stdout.decode("utf-8")
    assert out.startswith(f'// File generated by "gobake {inp}"\n// DO NOT EDIT!\n\npackage main\n')
    assert "func hi() io.ReadCloser {" in out
    assert '\tconst a = "\\x68\\x69"\n' in out
    assert '"compress/gzip"' not in out


def test_cli_stdin_gets_default_name() -> None:
    r = _run_cli("-decl", "const", stdin=b"\x00\x01")
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert 'const stdin = "\\x00\\x01"\n' in r.stdout.decode("utf-8")


def test_cli_output_file_and_package_inference(tmp_path: Path) -> None:
    pkg = tmp_path / "assets"
    pkg.mkdir()
    (pkg / "doc.go").write_text("// Package assets holds baked files.\npackage assets\n", encoding="utf-8")
    inp = tmp_path / "index.html"
    data = b"<html>" + b"x" * 200 + b"</html>\n"
    inp.write_bytes(data)
    out = pkg / "index_gen.go"

    r = _run_cli(
        "--decl", "var", "--type", "[]byte", "--compress", "gzip", "--export",
        "--output", str(out), str(inp),
    )
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert r.stdout == b""

    src = out.read_text(encoding="utf-8")
    assert "\npackage assets\n" in src
    assert "var Index = []byte(" in src
    assert "import (" not in src
    assert gzip.decompress(_literal_bytes(src)) == data


def test_cli_spec_and_flag_precedence(tmp_path: Path) -> None:
    inp = tmp_path / "data.bin"
    inp.write_bytes(b"abc")
    spec = json.dumps({"spec": "gobake.bake.v1", "decl": "const", "name": "fromSpec", "package": "p"})

    r = _run_cli("--spec", spec, str(inp))
    assert r.returncode == 0, (r.stdout, r.stderr)
    out = r.stdout.decode("utf-8")
    assert "const fromSpec = " in out
    assert "\npackage p\n" in out

    r = _run_cli("--spec", spec, "--decl", "var", "--name", "flag", str(inp))
    assert r.returncode == 0, (r.stdout, r.stderr)
    assert "var flag = " in r.stdout.decode("utf-8")


def test_cli_checked_zstd(tmp_path: Path) -> None:
    inp = tmp_path / "blob.bin"
    inp.write_bytes(b"z" * 100)
    r = _run_cli("--compress", "zstd", "--checked", str(inp))
    assert r.returncode == 0, (r.stdout, r.stderr)
    out = r.stdout.decode("utf-8")
    assert '\t"github.com/klauspost/compress/zstd"\n' in out
    assert "func blob() (io.ReadCloser, error) {" in out


def test_cli_missing_input_exit_11(tmp_path: Path) -> None:
    r = _run_cli(str(tmp_path / "missing.bin"))
    assert r.returncode == 11
    assert b"[gobake] read file" in r.stderr


def test_cli_bad_spec_exit_2() -> None:
    r = _run_cli("--spec", "{}", stdin=b"x")
    assert r.returncode == 2
    assert b"[gobake]" in r.stderr


def test_cli_bad_level_exit_2() -> None:
    r = _run_cli("--compress", "gzip", "--level", "42", stdin=b"x")
    assert r.returncode == 2
    assert b"[gobake]" in r.stderr


def test_cli_name_without_letters_exit_2(tmp_path: Path) -> None:
    inp = tmp_path / "2024.bin"
    inp.write_bytes(b"x")
    r = _run_cli(str(inp))
    assert r.returncode == 2
    assert b"identifier" in r.stderr


def test_cli_unwritable_output_exit_13(tmp_path: Path) -> None:
    r = _run_cli("--output", str(tmp_path / "nope" / "gen.go"), stdin=b"x")
    assert r.returncode == 13
    assert b"[gobake] write file" in r.stderr
    assert not (tmp_path / "nope").exists()


def test_cli_level_without_compress_exit_2() -> None:
    r = _run_cli("--level", "5", stdin=b"x")
    assert r.returncode == 2
    assert b"requires gzip or zstd" in r.stderr
    assert r.stdout == b""
