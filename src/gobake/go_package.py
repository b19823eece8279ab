"""Infer the Go package name of a destination directory.

Mirrors what ``go/build.ImportDir`` would report for the directory's
existing sources, without needing a Go toolchain:
  - files starting with '_' or '.' are ignored
  - files excluded by their build constraints are ignored: ``//go:build``
    expressions (or legacy ``// +build`` lines), and ``_GOOS``/``_GOARCH``
    filename suffixes for another platform
  - ``*_test.go`` files declaring ``package X_test`` are external tests and
    do not vote
  - all remaining files must agree on one package name

The target platform is ``$GOOS``/``$GOARCH`` when set, otherwise the host.
Satisfied tags: GOOS, GOARCH, ``unix`` on unix systems, ``gc`` and every
``go1.N`` release tag. ``cgo`` and custom tags are unsatisfied.

Anything else (no sources, conflicting names, unreadable dir) falls back to
DEFAULT_PACKAGE.
"""

from __future__ import annotations

import os
import platform
import re
import sys
from dataclasses import dataclass
from pathlib import Path

DEFAULT_PACKAGE = "main"

KNOWN_OS = frozenset(
    "aix android darwin dragonfly freebsd hurd illumos ios js linux nacl netbsd "
    "openbsd plan9 solaris wasip1 windows zos".split()
)
KNOWN_ARCH = frozenset(
    "386 amd64 amd64p32 arm armbe arm64 arm64be loong64 mips mipsle mips64 mips64le "
    "mips64p32 mips64p32le ppc ppc64 ppc64le riscv riscv64 s390 s390x sparc sparc64 wasm".split()
)
UNIX_OS = frozenset(
    "aix android darwin dragonfly freebsd hurd illumos ios linux netbsd openbsd solaris".split()
)

_MACHINE_TO_ARCH = {
    "x86_64": "amd64",
    "amd64": "amd64",
    "i386": "386",
    "i686": "386",
    "x86": "386",
    "aarch64": "arm64",
    "arm64": "arm64",
    "armv7l": "arm",
    "armv6l": "arm",
    "ppc64le": "ppc64le",
    "ppc64": "ppc64",
    "s390x": "s390x",
    "riscv64": "riscv64",
    "loongarch64": "loong64",
    "mips64": "mips64",
}

_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
_PACKAGE_RE = re.compile(r"^\s*package\s+([A-Za-z_][A-Za-z0-9_]*)", re.MULTILINE)
_GO_BUILD_RE = re.compile(r"^//go:build\s+(.+?)\s*$", re.MULTILINE)
_PLUS_BUILD_RE = re.compile(r"^//\s*\+build\s+(.+?)\s*$", re.MULTILINE)
_TOKEN_RE = re.compile(r"\s*(\(|\)|!|&&|\|\||[A-Za-z0-9_.]+)")
_RELEASE_TAG = re.compile(r"^go1\.\d+$")


@dataclass(frozen=True)
class Platform:
    goos: str
    goarch: str

    def has_tag(self, tag: str) -> bool:
        if tag in (self.goos, self.goarch, "gc"):
            return True
        if tag == "unix":
            return self.goos in UNIX_OS
        # GOOS=android implies linux, GOOS=illumos implies solaris, ios implies darwin
        implied = {"android": "linux", "illumos": "solaris", "ios": "darwin"}
        if implied.get(self.goos) == tag:
            return True
        return bool(_RELEASE_TAG.match(tag))


def host_platform() -> Platform:
    goos = os.environ.get("GOOS", "").strip()
    if not goos:
        if sys.platform.startswith("linux"):
            goos = "linux"
        elif sys.platform == "darwin":
            goos = "darwin"
        elif sys.platform in ("win32", "cygwin"):
            goos = "windows"
        else:
            goos = re.sub(r"\d+$", "", sys.platform)
    goarch = os.environ.get("GOARCH", "").strip()
    if not goarch:
        machine = platform.machine().lower()
        goarch = _MACHINE_TO_ARCH.get(machine, machine)
    return Platform(goos=goos, goarch=goarch)


class _ExprParser:
    """Recursive descent over ``//go:build`` syntax: ||, &&, !, parens, tags."""

    def __init__(self, text: str, plat: Platform):
        self.tokens = _TOKEN_RE.findall(text)
        if "".join(self.tokens) != re.sub(r"\s+", "", text):
            raise ValueError(f"bad //go:build expression: {text!r}")
        self.pos = 0
        self.plat = plat

    def _peek(self) -> str | None:
        return self.tokens[self.pos] if self.pos < len(self.tokens) else None

    def _next(self) -> str:
        tok = self._peek()
        if tok is None:
            raise ValueError("unexpected end of //go:build expression")
        self.pos += 1
        return tok

    def parse(self) -> bool:
        v = self._or()
        if self._peek() is not None:
            raise ValueError(f"unexpected token {self._peek()!r} in //go:build expression")
        return v

    def _or(self) -> bool:
        v = self._and()
        while self._peek() == "||":
            self._next()
            rhs = self._and()
            v = v or rhs
        return v

    def _and(self) -> bool:
        v = self._not()
        while self._peek() == "&&":
            self._next()
            rhs = self._not()
            v = v and rhs
        return v

    def _not(self) -> bool:
        if self._peek() == "!":
            self._next()
            return not self._not()
        tok = self._next()
        if tok == "(":
            v = self._or()
            if self._next() != ")":
                raise ValueError("missing ')' in //go:build expression")
            return v
        if tok in (")", "&&", "||"):
            raise ValueError(f"unexpected token {tok!r} in //go:build expression")
        return self.plat.has_tag(tok)


def eval_go_build(expr: str, plat: Platform) -> bool:
    return _ExprParser(expr, plat).parse()


def eval_plus_build(line: str, plat: Platform) -> bool:
    """Legacy syntax: space-separated options are ORed, comma-separated terms ANDed."""
    for option in line.split():
        terms = option.split(",")
        ok = True
        for term in terms:
            neg = term.startswith("!")
            tag = term[1:] if neg else term
            if not tag or plat.has_tag(tag) == neg:
                ok = False
                break
        if ok:
            return True
    return False


def matches_filename(filename: str, plat: Platform) -> bool:
    """Apply the ``name_GOOS_GOARCH.go`` / ``name_GOOS.go`` / ``name_GOARCH.go`` rules."""
    stem = filename[:-3] if filename.endswith(".go") else filename
    parts = stem.split("_")
    if parts and parts[-1] == "test":
        parts = parts[:-1]
    # the first element is the base name, never a constraint
    parts = parts[1:]
    if len(parts) >= 2 and parts[-2] in KNOWN_OS and parts[-1] in KNOWN_ARCH:
        return plat.has_tag(parts[-2]) and plat.goarch == parts[-1]
    if parts and parts[-1] in KNOWN_OS:
        return plat.has_tag(parts[-1])
    if parts and parts[-1] in KNOWN_ARCH:
        return plat.goarch == parts[-1]
    return True


def matches_constraints(head: str, plat: Platform) -> bool:
    """Evaluate the build constraints found in a file header.

    ``//go:build`` wins over ``// +build``; multiple ``+build`` lines are ANDed.
    """
    m = _GO_BUILD_RE.search(head)
    if m:
        return eval_go_build(m.group(1), plat)
    return all(eval_plus_build(line, plat) for line in _PLUS_BUILD_RE.findall(head))


def _header(src: str) -> tuple[str | None, str]:
    """Return (package name, text preceding the package clause)."""
    cleaned = _BLOCK_COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), src)
    # line comments never contain a package clause of the file
    code = re.sub(r"//[^\n]*", "", cleaned)
    m = _PACKAGE_RE.search(code)
    if not m:
        return None, src
    line_no = code.count("\n", 0, m.start(1))
    head = "\n".join(src.splitlines()[:line_no])
    return m.group(1), head


def package_of_file(path: Path, plat: Platform | None = None) -> str | None:
    """Package name declared by one .go file, or None if it does not count."""
    plat = plat or host_platform()
    if path.name.startswith(("_", ".")):
        return None
    if not matches_filename(path.name, plat):
        return None
    try:
        src = path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None
    name, head = _header(src)
    if name is None:
        return None
    try:
        if not matches_constraints(head, plat):
            return None
    except ValueError:
        # go/build rejects the file too
        return None
    if path.name.endswith("_test.go") and name.endswith("_test"):
        return None
    return name


def infer_package(directory: Path, plat: Platform | None = None) -> str | None:
    plat = plat or host_platform()
    try:
        files = sorted(p for p in directory.iterdir() if p.suffix == ".go" and p.is_file())
    except OSError:
        return None
    names = {n for n in (package_of_file(p, plat) for p in files) if n is not None}
    if len(names) != 1:
        return None
    return next(iter(names))


def resolve_package(output: Path | None, explicit: str | None = None) -> str:
    """Package clause for a generated file written to ``output``.

    precedence: explicit > inferred from output's directory > DEFAULT_PACKAGE
    """
    if explicit:
        return explicit
    if output is None:
        return DEFAULT_PACKAGE
    return infer_package(output.parent) or DEFAULT_PACKAGE
