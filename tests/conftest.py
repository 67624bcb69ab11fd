from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path
from typing import Dict, Optional

import pytest

from assetc import GeneratorConfig, generate

GENERATED = ("assets", "assetsdata")
MTIME = 1_600_000_000


def write_tree(root: Path, tree: Dict[str, bytes], mtime: Optional[int] = MTIME) -> None:
    for rel, data in tree.items():
        p = root / rel
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_bytes(data)
        if mtime is not None:
            os.utime(p, (mtime, mtime))


def _forget_generated() -> None:
    for name in GENERATED:
        sys.modules.pop(name, None)


@pytest.fixture
def build(tmp_path: Path, monkeypatch):
    """Write `tree` under tmp/web, generate from root "web" and import the runtime.

    Keys in the generated table are "web/<rel>" with the platform separator.
    """
    monkeypatch.setattr(sys, "dont_write_bytecode", True)

    def _build(tree: Dict[str, bytes], *, no_compress: bool = False):
        write_tree(tmp_path / "web", tree)
        out = tmp_path / "gen"
        out.mkdir(exist_ok=True)
        monkeypatch.chdir(tmp_path)
        result = generate(GeneratorConfig(
            roots=["web"],
            output=str(out / "assets"),
            no_compress=no_compress,
            formatter=[],
        ))
        monkeypatch.syspath_prepend(str(out))
        _forget_generated()
        return result, importlib.import_module("assets")

    yield _build
    _forget_generated()
