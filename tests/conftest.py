"""Shared pytest fixtures for z-contract-linter tests."""

from __future__ import annotations

import re
from collections import defaultdict
from pathlib import Path

import pytest

from z_contract_linter.source.loader import CompilationUnit, SourceFile, parse_source

TESTDATA = Path(__file__).parent / "testdata" / "src" / "testlintdata"

_WANT_RE = re.compile(r"//\s*want\s+(.*)$")
_PATTERN_RE = re.compile(r'`([^`]*)`|"((?:[^"\\]|\\.)*)"')


@pytest.fixture
def testdata() -> Path:
    return TESTDATA


@pytest.fixture
def go_unit():
    """Build a CompilationUnit from in-memory Go sources: go_unit(a_go=..., ...)."""

    def _make(*sources: str, directory: str = "pkg") -> CompilationUnit:
        files = [
            parse_source(src.encode(), path=f"{directory}/file{i}.go")
            for i, src in enumerate(sources)
        ]
        return CompilationUnit(directory=directory, package=files[0].package, files=files)

    return _make


def collect_wants(files: list[SourceFile]) -> dict[tuple[str, int], list[re.Pattern]]:
    """Read ``// want `regexp` ...`` expectations, keyed by (file, line)."""
    wants: dict[tuple[str, int], list[re.Pattern]] = defaultdict(list)
    for f in files:
        for lineno, line in enumerate(f.source.decode().splitlines(), start=1):
            m = _WANT_RE.search(line)
            if not m:
                continue
            for raw, quoted in _PATTERN_RE.findall(m.group(1)):
                pattern = raw if raw else quoted.replace('\\"', '"')
                wants[(f.path, lineno)].append(re.compile(pattern))
    return wants


@pytest.fixture
def check_wants():
    """Assert diagnostics match ``// want`` comments exactly, line by line."""

    def _check(files: list[SourceFile], diagnostics) -> None:
        wants = collect_wants(files)
        unexpected = []
        for d in diagnostics:
            key = (d.position.filename, d.position.line)
            patterns = wants.get(key, [])
            for i, pattern in enumerate(patterns):
                if pattern.search(d.message):
                    del patterns[i]
                    break
            else:
                unexpected.append(f"{d.position}: unexpected diagnostic: {d.message}")
        missing = [
            f"{path}:{line}: no diagnostic matching {p.pattern!r}"
            for (path, line), patterns in wants.items()
            for p in patterns
        ]
        assert not unexpected and not missing, "\n".join(unexpected + missing)

    return _check
