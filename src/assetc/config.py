from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import List, Optional

DEFAULT_PKGNAME = "main"
DEFAULT_OUTPUT = "assets"
DEFAULT_FORMATTER = ["black", "-q"]


@dataclass
class GeneratorConfig:
    roots: List[str]
    pkgname: str = DEFAULT_PKGNAME
    output: str = DEFAULT_OUTPUT
    no_compress: bool = False
    # empty list disables the post-format pass
    formatter: List[str] = field(default_factory=lambda: list(DEFAULT_FORMATTER))
    report: Optional[str] = None

    @property
    def data_path(self) -> str:
        return self.output + "data.py"

    @property
    def runtime_path(self) -> str:
        return self.output + ".py"

    @property
    def data_module(self) -> str:
        return os.path.basename(self.output) + "data"
