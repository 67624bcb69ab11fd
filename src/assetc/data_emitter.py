from __future__ import annotations

from typing import TextIO

from .encoder import compress as gzip_compress
from .encoder import escape
from .registry import AssetRecord, Registry
from .walker import WalkEntry

BANNER = "# Code generated by assetc. DO NOT EDIT."


class DataEmitter:
    """Streams per-asset byte constants and accessors into the data module.

    Every added asset gets `__bf<N>` and the accessors `_bf<N>` / `_cbf<N>`.
    `__cbf<N>` is only written when gzip made the payload strictly smaller;
    otherwise `_cbf<N>` returns the plain constant.
    """

    def __init__(self, fp: TextIO, registry: Registry, pkgname: str):
        self.fp = fp
        self.registry = registry
        self.pkgname = pkgname
        self._first = True

    def header(self) -> None:
        self.fp.write(f"{BANNER}\n")
        self.fp.write(f'"""Embedded asset data for package {self.pkgname}."""\n')

    def _stmt(self, text: str) -> None:
        # black: one blank line after the docstring, two between top-level statements
        self.fp.write("\n" if self._first else "\n\n")
        self.fp.write(text)
        self._first = False

    def add(self, entry: WalkEntry, compress: bool = True) -> AssetRecord:
        symbol = self.registry.next_symbol()
        size = len(entry.data)

        zdata = gzip_compress(entry.data) if compress else None
        # keep the compressed form only when it is strictly smaller
        if zdata is not None and len(zdata) >= size:
            zdata = None

        self._stmt(f'__{symbol} = b"{escape(entry.data)}"\n')
        self._stmt(f"def _{symbol}():\n    return __{symbol}\n")
        if zdata is not None:
            self._stmt(f'__c{symbol} = b"{escape(zdata)}"\n')
            self._stmt(f"def _c{symbol}():\n    return __c{symbol}\n")
        else:
            self._stmt(f"def _c{symbol}():\n    return __{symbol}\n")

        record = AssetRecord(
            logical_path=entry.path,
            symbol=symbol,
            size=size,
            zsize=len(zdata) if zdata is not None else 0,
            mtime=entry.info.st_mtime_ns // 1_000_000_000,
        )
        self.registry.add(record)
        return record
