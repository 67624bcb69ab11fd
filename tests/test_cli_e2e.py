from __future__ import annotations
from pathlib import Path
import os
import subprocess
import sys

from conftest import write_tree

REPO_ROOT = Path(__file__).resolve().parents[1]


def run_assetc(args, cwd: Path):
    cmd = [sys.executable, "-m", "assetc", "--formatter", ""] + args
    env = {**os.environ, "PYTHONPATH": str(REPO_ROOT / "src")}
    return subprocess.run(cmd, cwd=cwd, env=env, capture_output=True, text=True)


def test_cli_writes_both_modules(tmp_path: Path):
    write_tree(tmp_path / "web", {"a.txt": b"hi", "big.txt": b"A" * 10000, ".hidden": b"x"})
    p = run_assetc(["web"], tmp_path)
    assert p.returncode == 0, p.stderr
    assert "OK. assets=2" in p.stdout
    data = (tmp_path / "assetsdata.py").read_text(encoding="utf-8")
    runtime = (tmp_path / "assets.py").read_text(encoding="utf-8")
    assert data.startswith("# Code generated by assetc. DO NOT EDIT.\n")
    assert "__cbf2 = b\"" in data
    assert "from assetsdata import (" in runtime
    assert '"web/a.txt": _AssetFile(_bf1, _cbf1, 2, 0, ' in runtime


def test_cli_output_is_deterministic(tmp_path: Path):
    write_tree(tmp_path / "web", {"z.js": b"z" * 500, "a/b.css": b"b{}", "m.bin": bytes(range(256))})
    outs = []
    for _ in range(2):
        p = run_assetc(["web", "-o", "gen"], tmp_path)
        assert p.returncode == 0, p.stderr
        outs.append(((tmp_path / "gendata.py").read_bytes(), (tmp_path / "gen.py").read_bytes()))
    assert outs[0] == outs[1]


def test_cli_no_compress_and_pkgname(tmp_path: Path):
    write_tree(tmp_path / "web", {"big.txt": b"A" * 10000})
    p = run_assetc(["-nc", "-pkgname", "myapp", "web"], tmp_path)
    assert p.returncode == 0, p.stderr
    data = (tmp_path / "assetsdata.py").read_text(encoding="utf-8")
    runtime = (tmp_path / "assets.py").read_text(encoding="utf-8")
    assert "__cbf1" not in data
    assert "def _cbf1():\n    return __bf1\n" in data
    assert "package myapp" in data
    assert "from myapp.assetsdata import (" in runtime


def test_cli_unwritable_output_is_fatal(tmp_path: Path):
    write_tree(tmp_path / "web", {"a.txt": b"hi"})
    p = run_assetc(["web", "-o", str(tmp_path / "no" / "such" / "dir" / "assets")], tmp_path)
    assert p.returncode == 2
    assert p.stderr.startswith("ERROR: cannot create")


def test_cli_read_errors_are_silent_unless_warned(tmp_path: Path):
    write_tree(tmp_path / "web", {"ok.txt": b"ok"})
    os.symlink(tmp_path / "gone", tmp_path / "web" / "dangling.txt")

    p = run_assetc(["web"], tmp_path)
    assert p.returncode == 0
    assert "ASSETC-READ-0001" not in p.stderr
    assert "OK. assets=1" in p.stdout

    p = run_assetc(["-w", "web"], tmp_path)
    assert p.returncode == 0
    assert "warning: ASSETC-READ-0001: web/dangling.txt" in p.stderr


def test_cli_missing_root_does_not_stop_later_roots(tmp_path: Path):
    write_tree(tmp_path / "web", {"a.txt": b"hi"})
    p = run_assetc(["-w", "missing", "web"], tmp_path)
    assert p.returncode == 0
    assert "ASSETC-WALK-0001: missing" in p.stderr
    assert '"web/a.txt"' in (tmp_path / "assets.py").read_text(encoding="utf-8")


def test_cli_same_root_twice_embeds_once(tmp_path: Path):
    write_tree(tmp_path / "web", {"a.txt": b"hi"})
    p = run_assetc(["-w", "web", "web"], tmp_path)
    assert p.returncode == 0
    assert "OK. assets=1" in p.stdout
    assert "ASSETC-DUP-0001" in p.stderr
    assert "__bf2" not in (tmp_path / "assetsdata.py").read_text(encoding="utf-8")


def test_cli_requires_a_root(tmp_path: Path):
    p = run_assetc([], tmp_path)
    assert p.returncode == 2
    assert "usage:" in p.stderr
