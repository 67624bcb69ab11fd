"""
Generation pipeline: roots -> data module -> runtime module -> report.

The data pass streams constants to disk as files are walked and fills the
registry; the runtime pass only reads the registry.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, TextIO

from .config import GeneratorConfig
from .data_emitter import DataEmitter
from .diagnostics import DUPLICATE_PATH, READ_FAILED, WALK_FAILED, Diagnostic
from .postformat import run_formatter
from .registry import Registry
from .report import write_report
from .runtime_emitter import emit_runtime
from .walker import WalkError, walk

logger = logging.getLogger(__name__)


class OutputError(Exception):
    pass


@dataclass
class GenerationResult:
    config: GeneratorConfig
    registry: Registry
    data_path: str
    runtime_path: str
    diagnostics: List[Diagnostic] = field(default_factory=list)


def _create(path: str) -> TextIO:
    try:
        return open(path, "w", encoding="utf-8", newline="\n")
    except OSError as e:
        raise OutputError(f"cannot create {path}: {e.strerror or e}") from e


def _ingest(cfg: GeneratorConfig, emitter: DataEmitter, diagnostics: List[Diagnostic]) -> None:
    def on_read_error(path: str, exc: OSError) -> None:
        diagnostics.append(Diagnostic(READ_FAILED, path, exc.strerror or str(exc)))

    for root in cfg.roots:
        try:
            for entry in walk(root, on_read_error):
                if entry.path in emitter.registry:
                    diagnostics.append(Diagnostic(DUPLICATE_PATH, entry.path, "already embedded from an earlier root"))
                    continue
                rec = emitter.add(entry, compress=not cfg.no_compress)
                logger.debug("%s -> %s (%d bytes, gzip %d)", rec.logical_path, rec.symbol, rec.size, rec.zsize)
        except WalkError as e:
            diagnostics.append(Diagnostic(WALK_FAILED, root, e.strerror or str(e)))


def generate(cfg: GeneratorConfig) -> GenerationResult:
    registry = Registry()
    result = GenerationResult(cfg, registry, cfg.data_path, cfg.runtime_path)

    try:
        with _create(cfg.data_path) as fp:
            emitter = DataEmitter(fp, registry, cfg.pkgname)
            emitter.header()
            _ingest(cfg, emitter, result.diagnostics)
    except OSError as e:
        raise OutputError(f"cannot write {cfg.data_path}: {e}") from e
    run_formatter(cfg.formatter, cfg.data_path)

    try:
        with _create(cfg.runtime_path) as fp:
            emit_runtime(fp, registry, cfg.pkgname, cfg.data_module)
    except OSError as e:
        raise OutputError(f"cannot write {cfg.runtime_path}: {e}") from e
    run_formatter(cfg.formatter, cfg.runtime_path)

    logger.info("embedded %d assets into %s and %s", len(registry), cfg.data_path, cfg.runtime_path)

    if cfg.report:
        try:
            write_report(result, cfg.report)
        except OSError as e:
            raise OutputError(f"cannot write {cfg.report}: {e}") from e
    return result
