"""Static checks on exception handling in the package sources.

Errors are raised to the caller or reported; no handler may catch everything
or silently swallow an exception.
"""

import ast
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

PRODUCTION_DIRS = [
    "simplememorystore",
    "common",
]


def iter_python_files(base_dir: Path) -> Iterator[Path]:
    """Iterate over all Python files in a directory tree."""
    for root, _, files in os.walk(base_dir):
        for f in files:
            if f.endswith(".py") and not f.startswith("test_"):
                yield Path(root) / f


class ExceptHandlerVisitor(ast.NodeVisitor):
    """AST visitor that finds bare ``except:`` clauses and ``except ...: pass``."""

    def __init__(self) -> None:
        self.violations: list[tuple[int, str]] = []

    def visit_ExceptHandler(self, node: ast.ExceptHandler) -> None:
        if node.type is None:
            self.violations.append((node.lineno, "bare 'except:' clause"))
        if len(node.body) == 1 and isinstance(node.body[0], ast.Pass):
            self.violations.append((node.lineno, "exception swallowed with 'pass'"))
        self.generic_visit(node)


def collect_violations(workspace_root: Path) -> list[tuple[str, int, str]]:
    found: list[tuple[str, int, str]] = []
    for prod_dir in PRODUCTION_DIRS:
        for py_file in iter_python_files(workspace_root / prod_dir):
            tree = ast.parse(py_file.read_text(encoding="utf-8"), filename=str(py_file))
            visitor = ExceptHandlerVisitor()
            visitor.visit(tree)
            rel_path = str(py_file.relative_to(workspace_root))
            found.extend((rel_path, lineno, msg) for lineno, msg in visitor.violations)
    return found


def test_no_swallowed_exceptions_in_package_code() -> None:
    workspace_root = Path(__file__).resolve().parents[1]
    violations = collect_violations(workspace_root)
    if violations:
        lines = ["Found exception handlers that hide errors:"]
        lines.extend(f"  {path}:{lineno} - {msg}" for path, lineno, msg in violations)
        pytest.fail("\n".join(lines))


def test_visitor_flags_swallowed_exception() -> None:
    tree = ast.parse("try:\n    x = 1\nexcept:\n    pass\n")
    visitor = ExceptHandlerVisitor()
    visitor.visit(tree)
    assert [msg for _, msg in visitor.violations] == [
        "bare 'except:' clause",
        "exception swallowed with 'pass'",
    ]
