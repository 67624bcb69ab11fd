"""
Runtime module emitter.

The runtime is fixed text; only the header, the accessor import and the
table literal depend on the registry. Table entries are written in sorted
logical-path order so the output is stable for a given input set.
"""

from __future__ import annotations

from typing import List, TextIO

from .data_emitter import BANNER
from .encoder import quote
from .registry import Registry

IMPORTS = """\
import mimetypes
import posixpath
from datetime import datetime, timedelta, timezone
from typing import Callable, NamedTuple

from werkzeug.exceptions import NotFound
from werkzeug.http import http_date
from werkzeug.wrappers import Request, Response
"""

RUNTIME = '''\


class AssetNotFound(KeyError):
    pass


class _AssetFile(NamedTuple):
    data: Callable[[], bytes]
    zdata: Callable[[], bytes]
    size: int
    zsize: int
    time: int

    def read(self) -> bytes:
        return self.data()

    def read_zip(self) -> bytes:
        return self.zdata()

    def mod_time(self) -> datetime:
        return datetime.fromtimestamp(self.time, timezone.utc)

    def comp(self) -> bool:
        return self.zsize > 0


class _AssetFS(dict):
    def open(self, name: str) -> _AssetFile:
        try:
            return self[name]
        except KeyError:
            raise AssetNotFound(f"{name} not found") from None


def asset(name: str) -> bytes:
    return _bindata.open(name).read()


def asset_zip(name: str) -> bytes:
    return _bindata.open(name).read_zip()


def _type_by_extension(ext: str) -> str:
    if not ext:
        return ""
    return mimetypes.guess_type("asset" + ext, strict=False)[0] or ""


def serve_assets(prefix: str = ""):
    """WSGI application serving the asset named `prefix + request.path`."""

    @Request.application
    def application(request: Request) -> Response:
        name = prefix + request.path
        try:
            f = _bindata.open(name)
        except AssetNotFound:
            raise NotFound() from None

        # HTTP dates carry whole seconds
        since = request.if_modified_since
        if since is not None and f.mod_time() < since + timedelta(seconds=1):
            return Response(status=304)

        headers = {
            "Content-Type": _type_by_extension(posixpath.splitext(name)[1]),
            "Last-Modified": http_date(f.time),
        }
        if "gzip" in request.headers.get("Accept-Encoding", "") and f.comp():
            headers["Content-Encoding"] = "gzip"
            headers["Content-Length"] = str(f.zsize)
            return Response(f.read_zip(), status=200, headers=headers)

        headers["Content-Length"] = str(f.size)
        return Response(f.read(), status=200, headers=headers)

    return application
'''


def _header(pkgname: str) -> str:
    return (
        f"{BANNER}\n"
        f'"""Embedded assets for package {pkgname}.\n'
        "\n"
        "asset(name) and asset_zip(name) return the embedded bytes;\n"
        "serve_assets(prefix) returns a WSGI application serving them.\n"
        '"""\n'
        "\n"
    )


def _accessor_import(registry: Registry, pkgname: str, data_module: str) -> List[str]:
    if not len(registry):
        return []
    module = data_module if pkgname == "main" else f"{pkgname}.{data_module}"
    lines = ["", f"from {module} import ("]
    for rec in registry.sorted():
        lines.append(f"    {rec.accessor},")
        lines.append(f"    {rec.zaccessor},")
    lines.append(")")
    return lines


def _table(registry: Registry) -> List[str]:
    records = registry.sorted()
    if not records:
        return ["_bindata = _AssetFS({})"]
    lines = ["_bindata = _AssetFS(", "    {"]
    for rec in records:
        lines.append(
            f"        {quote(rec.logical_path)}: _AssetFile("
            f"{rec.accessor}, {rec.zaccessor}, {rec.size}, {rec.zsize}, {rec.mtime}),"
        )
    lines += ["    }", ")"]
    return lines


def emit_runtime(fp: TextIO, registry: Registry, pkgname: str, data_module: str) -> None:
    fp.write(_header(pkgname))
    fp.write(IMPORTS)
    for line in _accessor_import(registry, pkgname, data_module):
        fp.write(line + "\n")
    fp.write(RUNTIME)
    fp.write("\n\n")
    for line in _table(registry):
        fp.write(line + "\n")
