#!/usr/bin/env python3
"""Complexity guard for conversion orchestrators and artifact writers."""

from __future__ import annotations

import ast
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
TARGETS = (
    ROOT / "src/bin2cpp/application/use_cases.py",
    ROOT / "src/bin2cpp/adapters/emitters.py",
)
MAX_STATEMENTS = 25


def _count_statements(node: ast.AST) -> int:
    return sum(isinstance(child, ast.stmt) for child in ast.walk(node)) - 1


def _functions(tree: ast.Module) -> list[ast.FunctionDef]:
    found: list[ast.FunctionDef] = []
    for node in tree.body:
        if isinstance(node, ast.FunctionDef):
            found.append(node)
        elif isinstance(node, ast.ClassDef):
            found.extend(n for n in node.body if isinstance(n, ast.FunctionDef))
    return found


def main() -> None:
    """Fail when a function exceeds the nested statement threshold."""
    violations: list[str] = []
    for target in TARGETS:
        tree = ast.parse(target.read_text(encoding="utf-8"))
        for func in _functions(tree):
            count = _count_statements(func)
            if count > MAX_STATEMENTS:
                violations.append(f"{target.name}:{func.name}: {count} statements")
    if violations:
        raise SystemExit(
            "Complexity threshold exceeded:\n"
            + "\n".join(f"- {v}" for v in violations)
        )
    print("Orchestrator complexity check passed.")


if __name__ == "__main__":
    main()
