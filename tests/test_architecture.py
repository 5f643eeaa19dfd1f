"""
Architecture test

Purpose:
- Numeric layers (outer -> inner only, same layer allowed)
- No import cycles between project modules
"""

from __future__ import annotations

import ast
import pathlib
from typing import Dict, Iterator, List, Optional, Set, Tuple

import pytest

REPO_ROOT = pathlib.Path(__file__).resolve().parents[1]
SRC_DIR = REPO_ROOT / "src"
PACKAGE = "raytracer"

# Layer definitions (smaller is more inner)
# L0: common/util/errors, L1: core value types, L2: exporters, L3: package facade
LAYER_MAP = {
    ("common",): 0,
    ("util",): 0,
    ("errors",): 0,
    ("core",): 1,
    ("export",): 2,
    ("",): 3,
}


def iter_py_files(root: pathlib.Path) -> Iterator[pathlib.Path]:
    for p in root.rglob("*.py"):
        if "__pycache__" in p.parts:
            continue
        yield p


def module_name_from_path(path: pathlib.Path) -> str:
    rel = path.relative_to(SRC_DIR).with_suffix("")
    parts = list(rel.parts)
    if parts[-1] == "__init__":
        parts = parts[:-1]
    return ".".join(parts)


def section_of(module: str) -> Optional[str]:
    """`raytracer.core.matrix` -> `core`; the package itself -> `""`."""
    parts = module.split(".") if module else []
    if not parts or parts[0] != PACKAGE:
        return None
    return parts[1] if len(parts) > 1 else ""


def layer_of(module: str) -> Optional[int]:
    sec = section_of(module)
    if sec is None:
        return None
    return LAYER_MAP.get((sec,))


def iter_import_edges(py_path: pathlib.Path) -> Iterator[Tuple[str, str]]:
    src_mod = module_name_from_path(py_path)
    is_pkg = py_path.name == "__init__.py"
    tree = ast.parse(py_path.read_text(encoding="utf-8"), filename=str(py_path))
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            for alias in node.names:
                yield src_mod, alias.name
        elif isinstance(node, ast.ImportFrom):
            if node.level > 0:  # relative import
                src_parts = src_mod.split(".")
                # a package's own __init__ resolves "." to itself
                drop = node.level - 1 if is_pkg else node.level
                base = ".".join(src_parts[: len(src_parts) - drop])
                mod = node.module or ""
                tgt = f"{base}.{mod}" if mod else base
                if not node.module:
                    for alias in node.names:
                        yield src_mod, f"{base}.{alias.name}"
                    continue
                yield src_mod, tgt
            else:
                yield src_mod, node.module or ""


def collect_graph_and_violations() -> tuple[Dict[str, Set[str]], list[str]]:
    layering: list[str] = []
    graph: Dict[str, Set[str]] = {}

    py_files: List[pathlib.Path] = list(iter_py_files(SRC_DIR / PACKAGE))
    for py in py_files:
        graph.setdefault(module_name_from_path(py), set())

    for py in py_files:
        for src, tgt in iter_import_edges(py):
            s_layer = layer_of(src)
            t_layer = layer_of(tgt)
            if s_layer is None or t_layer is None:
                continue
            if s_layer < t_layer:
                layering.append(f"[{py}] {src} (L{s_layer}) -> {tgt} (L{t_layer})")
            if tgt in graph and tgt != src:
                graph[src].add(tgt)

    return graph, layering


def find_cycles(graph: Dict[str, Set[str]]) -> List[List[str]]:
    cycles: List[List[str]] = []
    WHITE, GRAY, BLACK = 0, 1, 2
    color: Dict[str, int] = {u: WHITE for u in graph}
    stack: List[str] = []

    def dfs(u: str) -> None:
        color[u] = GRAY
        stack.append(u)
        for v in sorted(graph.get(u, ())):
            if color[v] == WHITE:
                dfs(v)
            elif color[v] == GRAY:
                cycle = stack[stack.index(v) :] + [v]
                if cycle not in cycles:
                    cycles.append(cycle)
        stack.pop()
        color[u] = BLACK

    for node in sorted(graph):
        if color[node] == WHITE:
            dfs(node)
    return cycles


def _is_package_init_edge(src: str, tgt: str) -> bool:
    # a package __init__ re-exporting its own submodules is not a cycle
    return tgt.startswith(src + ".")


@pytest.mark.smoke
def test_architecture_import_rules():
    graph, layering = collect_graph_and_violations()
    pruned = {
        u: {v for v in vs if not _is_package_init_edge(u, v)} for u, vs in graph.items()
    }
    cycles = find_cycles(pruned)
    msgs: list[str] = []
    if layering:
        msgs.append("Layer violations:\n" + "\n".join(layering))
    if cycles:
        msgs.append("Cycles:\n" + "\n".join(" -> ".join(c) for c in cycles))
    assert not msgs, "\n\n".join(msgs)


def test_every_module_is_assigned_a_layer():
    unknown = [
        mod
        for mod in (module_name_from_path(p) for p in iter_py_files(SRC_DIR / PACKAGE))
        if layer_of(mod) is None
    ]
    assert not unknown, f"modules without a layer: {unknown}"
