"""Source conventions for annotations across the package and examples."""

from __future__ import annotations

import ast
from pathlib import Path

SOURCE_ROOTS = (Path("starfleet"), Path("examples"))


def _modules() -> list[Path]:
    return sorted(p for root in SOURCE_ROOTS for p in root.rglob("*.py") if p.name != "__init__.py")


def _is_annotated(tree: ast.Module) -> bool:
    for node in ast.walk(tree):
        if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef)):
            if node.returns is not None or any(a.annotation is not None for a in node.args.args):
                return True
        if isinstance(node, ast.AnnAssign):
            return True
    return False


def _first_import(tree: ast.Module) -> ast.stmt | None:
    body = list(tree.body)
    if body and isinstance(body[0], ast.Expr) and isinstance(body[0].value, ast.Constant):
        body = body[1:]
    return body[0] if body else None


def test_annotated_modules_postpone_evaluation() -> None:
    missing = []
    for path in _modules():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        if not _is_annotated(tree):
            continue
        first = _first_import(tree)
        if not (
            isinstance(first, ast.ImportFrom)
            and first.module == "__future__"
            and any(alias.name == "annotations" for alias in first.names)
        ):
            missing.append(str(path))
    assert not missing, f"modules without a leading 'from __future__ import annotations': {missing}"


def test_optional_values_use_union_syntax() -> None:
    offending = []
    for path in _modules():
        tree = ast.parse(path.read_text(encoding="utf-8"))
        for node in ast.walk(tree):
            if isinstance(node, ast.Name) and node.id in {"Optional", "Union"}:
                offending.append(f"{path}:{node.lineno}")
            elif isinstance(node, ast.Attribute) and node.attr in {"Optional", "Union"}:
                offending.append(f"{path}:{node.lineno}")
    assert not offending, f"use 'X | None' instead of Optional/Union: {offending}"


def test_convention_checks_cover_package_and_examples() -> None:
    names = {path.name for path in _modules()}
    assert {"coords.py", "projection.py", "__main__.py", "hexmap_duel_demo.py"} <= names
