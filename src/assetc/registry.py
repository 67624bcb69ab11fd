from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List


@dataclass(frozen=True)
class AssetRecord:
    logical_path: str
    symbol: str   # "bf<N>"
    size: int
    zsize: int    # 0 when the compressed form is not stored
    mtime: int    # seconds since the epoch

    @property
    def accessor(self) -> str:
        return "_" + self.symbol

    @property
    def zaccessor(self) -> str:
        return "_c" + self.symbol

    def comp(self) -> bool:
        return self.zsize > 0


class Registry:
    """Maps logical asset paths to the records emitted for them."""

    def __init__(self):
        self._by_path: Dict[str, AssetRecord] = {}
        self._n = 0

    def next_symbol(self) -> str:
        self._n += 1
        return f"bf{self._n}"

    def add(self, record: AssetRecord) -> None:
        if record.logical_path in self._by_path:
            raise KeyError(f"duplicate asset path: {record.logical_path}")
        self._by_path[record.logical_path] = record

    def get(self, logical_path: str) -> AssetRecord:
        return self._by_path[logical_path]

    def sorted(self) -> List[AssetRecord]:
        return [self._by_path[k] for k in sorted(self._by_path)]

    def __contains__(self, logical_path: object) -> bool:
        return logical_path in self._by_path

    def __len__(self) -> int:
        return len(self._by_path)

    def __iter__(self) -> Iterator[str]:
        return iter(self._by_path)
