"""解析输入单元与诊断信息"""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .result import SymbolResult


class TokenType(IntEnum):
    """输入单元的类型"""

    ARGUMENT = 0
    """用户传入的参数值"""
    COMMAND = 1
    """命令名称"""
    OPTION = 2
    """选项名称"""
    DOUBLE_DASH = 3
    """参数分隔标记 `--`"""
    UNPARSED = 4
    """未能解析的内容"""
    DIRECTIVE = 5
    """形如 `[debug]` 的指令"""
    IMPLICIT = 6
    """解析器合成的占位单元, 代表一个未设置的值"""


@dataclass(eq=True, frozen=True)
class Token:
    """不可变的输入单元

    Attributes:
        value (str): 原始文本
        type (TokenType): 单元类型
        position (int): 在输入中的位置, 未知时为 -1
    """

    value: str
    type: TokenType
    position: int = field(default=-1)

    @property
    def is_implicit(self) -> bool:
        return False

    def __str__(self):
        return self.value


@dataclass(eq=True, frozen=True, init=False)
class ImplicitToken(Token):
    """解析器合成的占位单元, 用于触发默认值替换

    Attributes:
        default (Any): 该占位单元所代表的值
    """

    default: Any = field(default=None, compare=False)

    def __init__(self, default: Any = None, position: int = -1):
        object.__setattr__(self, "value", "" if default is None else str(default))
        object.__setattr__(self, "type", TokenType.IMPLICIT)
        object.__setattr__(self, "position", position)
        object.__setattr__(self, "default", default)

    @property
    def is_implicit(self) -> bool:
        return True

    def __repr__(self):
        return f"ImplicitToken({self.default!r})"


@dataclass(eq=True, frozen=True)
class ParseError:
    """解析诊断信息, 作为返回值收集而非抛出

    Attributes:
        message (str): 诊断文本
        result (SymbolResult | None): 产生该诊断的解析结果
    """

    message: str
    result: SymbolResult | None = field(default=None)

    def __str__(self):
        return self.message
