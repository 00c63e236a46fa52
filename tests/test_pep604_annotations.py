from __future__ import annotations

import re
from pathlib import Path

import pytest

_DISALLOWED = [
    re.compile(r"\bOptional\["),
    re.compile(r"\btyping\.Optional\b"),
    re.compile(r"\bUnion\[[^\]]*\bNone\b"),
]


def _package_modules() -> list[Path]:
    return sorted(Path("gridpath").rglob("*.py"))


@pytest.mark.parametrize("path", _package_modules(), ids=lambda p: p.name)
def test_module_uses_pep604_optionals(path: Path) -> None:
    text = path.read_text(encoding="utf-8")
    offending = [pattern.pattern for pattern in _DISALLOWED if pattern.search(text)]
    assert not offending, f"PEP 604 violations in {path}: {offending}"


def test_package_modules_are_discovered() -> None:
    names = {path.name for path in _package_modules()}
    assert {"engine.py", "frontier.py", "astar.py"} <= names
