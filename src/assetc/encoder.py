"""
Byte encodings used by the emitters.

- compress: single-member gzip stream, header mtime pinned to 0
- escape: every byte as a lowercase \\xNN escape, usable inside b"..."
- quote: a double-quoted Python str literal for a logical path
"""

from __future__ import annotations

import gzip

_HEX = ["\\x%02x" % b for b in range(256)]


def compress(data: bytes) -> bytes:
    return gzip.compress(data, mtime=0)


def escape(data: bytes) -> str:
    return "".join([_HEX[b] for b in data])


def quote(text: str) -> str:
    out = ['"']
    for ch in text:
        if ch in '\\"':
            out.append("\\" + ch)
        elif ch.isprintable():
            out.append(ch)
        else:
            cp = ord(ch)
            if cp < 0x100:
                out.append("\\x%02x" % cp)
            elif cp < 0x10000:
                out.append("\\u%04x" % cp)
            else:
                out.append("\\U%08x" % cp)
    out.append('"')
    return "".join(out)
