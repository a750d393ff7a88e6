from pathlib import Path
from prettyimports.core.discovery import discover_files, is_supported_file
from prettyimports.support.config import OrganizeImportsConfig


def test_is_supported_file(tmp_path):
    cfg = OrganizeImportsConfig()
    assert is_supported_file(tmp_path / "a.ts", tmp_path, cfg)
    assert is_supported_file(tmp_path / "a.tsx", tmp_path, cfg)
    assert is_supported_file(tmp_path / "a.mjs", tmp_path, cfg)
    assert is_supported_file(tmp_path / "App.vue", tmp_path, cfg)
    assert not is_supported_file(tmp_path / "a.py", tmp_path, cfg)
    assert not is_supported_file(tmp_path / "a.css", tmp_path, cfg)


def test_excluded_dirs(tmp_path):
    cfg = OrganizeImportsConfig()
    assert not is_supported_file(tmp_path / "node_modules" / "x" / "index.js", tmp_path, cfg)
    assert not is_supported_file(tmp_path / "dist" / "a.js", tmp_path, cfg)
    # The root itself may live inside an excluded name
    root = tmp_path / "build" / "project"
    assert is_supported_file(root / "src" / "a.ts", root, cfg)


def test_discover_files(tmp_path):
    (tmp_path / "src").mkdir()
    (tmp_path / "src" / "b.ts").write_text("", encoding="utf-8")
    (tmp_path / "src" / "a.jsx").write_text("", encoding="utf-8")
    (tmp_path / "src" / "notes.md").write_text("", encoding="utf-8")
    (tmp_path / "node_modules" / "lib").mkdir(parents=True)
    (tmp_path / "node_modules" / "lib" / "index.js").write_text("", encoding="utf-8")

    files = discover_files(tmp_path, OrganizeImportsConfig())

    assert files == [tmp_path / "src" / "a.jsx", tmp_path / "src" / "b.ts"]


def test_discover_single_file(tmp_path):
    ts_file = tmp_path / "a.ts"
    ts_file.write_text("", encoding="utf-8")
    py_file = tmp_path / "a.py"
    py_file.write_text("", encoding="utf-8")

    assert discover_files(ts_file, OrganizeImportsConfig()) == [ts_file]
    assert discover_files(py_file, OrganizeImportsConfig()) == []
