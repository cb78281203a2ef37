from __future__ import annotations

from typing import TYPE_CHECKING, Generic, Iterator, TypeVar, overload

from .exceptions import DuplicateResult
from .i18n import lang

if TYPE_CHECKING:
    from .result import SymbolResult
    from .symbol import Symbol

TR = TypeVar("TR", bound="SymbolResult")


class SymbolResultSet(Generic[TR]):
    """按符号索引的有序子结果集合, 每个符号至多对应一个结果"""

    __slots__ = ("_results",)

    def __init__(self):
        self._results: dict[Symbol, TR] = {}

    def add(self, result: TR) -> None:
        if result.symbol in self._results:
            raise DuplicateResult(lang.require("result", "duplicate").format(target=result.symbol.name))
        self._results[result.symbol] = result

    def result_for(self, symbol: Symbol) -> TR | None:
        """返回该符号对应的子结果, 不存在时返回 None"""
        return self._results.get(symbol)

    def symbols(self) -> list[Symbol]:
        return list(self._results)

    def __contains__(self, item) -> bool:
        return item in self._results

    def __iter__(self) -> Iterator[TR]:
        return iter(self._results.values())

    def __len__(self) -> int:
        return len(self._results)

    @overload
    def __getitem__(self, item: int) -> TR: ...

    @overload
    def __getitem__(self, item: slice) -> list[TR]: ...

    def __getitem__(self, item):
        return list(self._results.values())[item]

    def __repr__(self):
        return f"SymbolResultSet({list(self._results.values())!r})"
