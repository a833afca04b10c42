from __future__ import annotations

import ast
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ImportRef:
    module: str
    line: int


def package_root() -> Path:
    return Path(__file__).resolve().parents[2]


def iter_python_files(base: Path) -> list[Path]:
    root = package_root()
    files: list[Path] = []
    for path in sorted(base.rglob("*.py")):
        rel = path.relative_to(root)
        if any(part.startswith(".") or part == "__pycache__" for part in rel.parts):
            continue
        if rel.parts and rel.parts[0] == "test":
            continue
        files.append(path)
    return files


def read_tree(path: Path) -> ast.Module:
    source = path.read_text(encoding="utf-8")
    return ast.parse(source, filename=str(path))


def _refs(node: ast.AST) -> list[ImportRef]:
    if isinstance(node, ast.Import):
        return [ImportRef(module=alias.name, line=node.lineno) for alias in node.names]
    if isinstance(node, ast.ImportFrom) and not node.level and node.module is not None:
        return [ImportRef(module=node.module, line=node.lineno)]
    return []


def parse_imports(path: Path) -> list[ImportRef]:
    """Every absolute import in the file, including ones inside functions."""
    imports: list[ImportRef] = []
    for node in ast.walk(read_tree(path)):
        imports.extend(_refs(node))
    return imports


def parse_module_imports(path: Path) -> list[ImportRef]:
    """Absolute imports executed when the module is imported.

    Function-local and `if TYPE_CHECKING:` imports are not included.
    """
    imports: list[ImportRef] = []
    for node in read_tree(path).body:
        imports.extend(_refs(node))
    return imports


def matches_prefix(module: str, prefix: str) -> bool:
    return module == prefix or module.startswith(prefix + ".")
