from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict

if TYPE_CHECKING:
    from .generator import GenerationResult

SCHEMA_PATH = Path(__file__).with_name("report.schema.json")


def load_schema() -> Dict[str, Any]:
    return json.loads(SCHEMA_PATH.read_text(encoding="utf-8"))


def build_report(result: "GenerationResult") -> Dict[str, Any]:
    cfg = result.config
    return {
        "status": "ok",
        "pkgname": cfg.pkgname,
        "outputs": {"data": result.data_path, "runtime": result.runtime_path},
        "compress": not cfg.no_compress,
        "assets": [
            {
                "path": rec.logical_path,
                "symbol": rec.symbol,
                "size": rec.size,
                "zsize": rec.zsize,
                "mtime": rec.mtime,
            }
            for rec in result.registry.sorted()
        ],
        "diagnostics": [d.to_dict() for d in result.diagnostics],
    }


def write_report(result: "GenerationResult", path: str) -> None:
    Path(path).write_text(json.dumps(build_report(result), indent=2) + "\n", encoding="utf-8")
