from __future__ import annotations

from ._utils import (
    iter_python_files,
    matches_prefix,
    package_root,
    parse_imports,
    parse_module_imports,
)


def test_direct_rich_imports_are_limited_to_console() -> None:
    root = package_root()
    allowlist = {"output/console.py"}

    offenders: list[str] = []
    for file_path in iter_python_files(root):
        rel = file_path.relative_to(root)
        if rel.as_posix() in allowlist:
            continue
        for item in parse_imports(file_path):
            if matches_prefix(item.module, "rich"):
                offenders.append(f"{rel}:{item.line}: direct rich import '{item.module}'")

    assert not offenders, "Direct rich usage policy violations:\n" + "\n".join(offenders)


def test_core_does_not_import_output_at_module_level() -> None:
    root = package_root()
    offenders: list[str] = []
    for file_path in iter_python_files(root / "core"):
        rel = file_path.relative_to(root)
        for item in parse_module_imports(file_path):
            if matches_prefix(item.module, "maybe.output"):
                offenders.append(f"{rel}:{item.line}: forbidden import '{item.module}'")

    assert not offenders, "core -> output dependency violations:\n" + "\n".join(offenders)
