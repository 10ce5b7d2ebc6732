"""Go source loader: file discovery, tree-sitter parsing, package grouping."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable

import structlog
import tree_sitter_go as tsgo
from tree_sitter import Language, Parser, Tree

from z_contract_linter.exceptions import SourceLoadError
from z_contract_linter.source.syntax import node_text, string_literal_value, top_level_declarations

log = structlog.get_logger("z_contract_linter.source")

GO_LANGUAGE = Language(tsgo.language())

# Directories the go tool never treats as part of a package tree
_SKIP_DIRS = {"vendor", "testdata"}

_MAJOR_VERSION_RE = re.compile(r"^v\d+$")
_GOPKG_VERSION_RE = re.compile(r"\.v\d+$")


@dataclass
class SourceFile:
    """One parsed Go file."""

    path: str
    source: bytes
    tree: Tree
    package: str = ""
    imports: dict[str, str] = field(default_factory=dict)  # local name -> import path

    @property
    def root(self):
        return self.tree.root_node


@dataclass
class CompilationUnit:
    """Files sharing a directory and package clause, analysed together."""

    directory: str
    package: str
    files: list[SourceFile] = field(default_factory=list)

    @property
    def name(self) -> str:
        return f"{self.directory}:{self.package}"


def default_import_name(import_path: str) -> str:
    """Guess the package name an import binds when it has no explicit name.

    Uses the last path element, skipping a trailing major-version element
    (``example.com/mod/v2`` -> ``mod``) and a gopkg.in style suffix
    (``gopkg.in/yaml.v3`` -> ``yaml``).
    """
    parts = [p for p in import_path.split("/") if p]
    if not parts:
        return ""
    name = parts[-1]
    if _MAJOR_VERSION_RE.match(name) and len(parts) > 1:
        name = parts[-2]
    return _GOPKG_VERSION_RE.sub("", name)


def _extract_imports(root) -> dict[str, str]:
    imports: dict[str, str] = {}
    for decl in top_level_declarations(root, "import_declaration"):
        specs = []
        for child in decl.named_children:
            if child.type == "import_spec":
                specs.append(child)
            elif child.type == "import_spec_list":
                specs.extend(c for c in child.named_children if c.type == "import_spec")
        for spec in specs:
            path_node = spec.child_by_field_name("path")
            if path_node is None:
                continue
            import_path = string_literal_value(path_node)
            name_node = spec.child_by_field_name("name")
            if name_node is None:
                imports[default_import_name(import_path)] = import_path
            elif name_node.type == "package_identifier":
                imports[node_text(name_node)] = import_path
            # dot and blank imports bind no qualifier
    return imports


def _extract_package(root) -> str:
    for clause in top_level_declarations(root, "package_clause"):
        for child in clause.named_children:
            if child.type == "package_identifier":
                return node_text(child)
    return ""


def parse_source(source: bytes, path: str = "<memory>") -> SourceFile:
    """Parse Go source bytes into a SourceFile."""
    parser = Parser(GO_LANGUAGE)
    tree = parser.parse(source)
    if tree.root_node.has_error:
        log.warning("source.syntax_error", path=path)
    return SourceFile(
        path=path,
        source=source,
        tree=tree,
        package=_extract_package(tree.root_node),
        imports=_extract_imports(tree.root_node),
    )


def parse_file(path: str | Path) -> SourceFile:
    """Read and parse one Go file."""
    p = Path(path)
    try:
        source = p.read_bytes()
    except OSError as e:
        raise SourceLoadError(str(p), e.strerror or str(e)) from e
    return parse_source(source, path=str(p))


def _skip_dir(name: str) -> bool:
    return name in _SKIP_DIRS or name.startswith(".") or name.startswith("_")


def discover_go_files(paths: Iterable[str | Path], include_tests: bool = True) -> list[Path]:
    """Expand files and directories into a sorted, de-duplicated list of .go files."""
    found: set[Path] = set()
    for raw in paths:
        root = Path(raw)
        if not root.exists():
            raise SourceLoadError(str(root), "no such file or directory")
        if root.is_file():
            if root.suffix == ".go":
                found.add(root)
            continue
        for dirpath, dirnames, filenames in os.walk(root):
            dirnames[:] = [d for d in dirnames if not _skip_dir(d)]
            for f in filenames:
                if f.endswith(".go"):
                    found.add(Path(dirpath) / f)

    if not include_tests:
        found = {f for f in found if not f.name.endswith("_test.go")}
    return sorted(found)


def load_units(paths: Iterable[str | Path], include_tests: bool = True) -> list[CompilationUnit]:
    """Parse all Go files under ``paths`` and group them into compilation units."""
    units: dict[tuple[str, str], CompilationUnit] = {}
    files = discover_go_files(paths, include_tests=include_tests)
    for path in files:
        source_file = parse_file(path)
        key = (str(path.parent), source_file.package)
        unit = units.get(key)
        if unit is None:
            unit = units[key] = CompilationUnit(directory=key[0], package=key[1])
        unit.files.append(source_file)

    log.debug("source.loaded", files=len(files), units=len(units))
    return [units[k] for k in sorted(units)]
