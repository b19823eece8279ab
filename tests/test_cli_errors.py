"""In-process CLI error paths (need monkeypatch, so no subprocess)."""

from __future__ import annotations

import zlib
from pathlib import Path

import pytest

from gobake import cli
from gobake.errors import EXIT_COMPRESS, EXIT_USAGE, CompressionError


def _broken_gzip(*_a: object, **_kw: object) -> bytes:
    raise zlib.error("Error -2 while compressing data")


def test_gzip_failure_exits_with_compress_code(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    inp = tmp_path / "logo.png"
    inp.write_bytes(b"\x89PNG" * 10)
    out = tmp_path / "logo_gen.go"
    monkeypatch.setattr("gobake.core.codec_gzip.gzip.compress", _broken_gzip)

    rc = cli.main(["--compress", "gzip", "--output", str(out), str(inp)])

    assert rc == EXIT_COMPRESS
    assert "[gobake] write gzip" in capsys.readouterr().err
    assert not out.exists()


def test_gzip_failure_reraises_with_debug(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    inp = tmp_path / "a.bin"
    inp.write_bytes(b"a")
    monkeypatch.setattr("gobake.core.codec_gzip.gzip.compress", _broken_gzip)

    with pytest.raises(CompressionError):
        cli.main(["--debug", "--compress", "gzip", str(inp)])


@pytest.mark.parametrize("compress", [None, "none", "", "brotli"])
def test_level_without_compression_is_usage_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str], compress: str | None
) -> None:
    inp = tmp_path / "a.bin"
    inp.write_bytes(b"a")
    argv = ["--level", "5", str(inp)]
    if compress is not None:
        argv[:0] = ["--compress", compress]

    assert cli.main(argv) == EXIT_USAGE
    captured = capsys.readouterr()
    assert "requires gzip or zstd" in captured.err
    assert captured.out == ""


def test_spec_level_without_compression_is_usage_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    inp = tmp_path / "a.bin"
    inp.write_bytes(b"a")
    spec = '{"spec": "gobake.bake.v1", "level": 3}'

    assert cli.main(["--spec", spec, str(inp)]) == EXIT_USAGE
    assert "[gobake]" in capsys.readouterr().err
