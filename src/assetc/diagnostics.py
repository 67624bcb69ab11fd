from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Dict

READ_FAILED = "ASSETC-READ-0001"
WALK_FAILED = "ASSETC-WALK-0001"
DUPLICATE_PATH = "ASSETC-DUP-0001"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    path: str
    message: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    def __str__(self) -> str:
        return f"{self.code}: {self.path}: {self.message}"
