"""ResultTree 解析结果树"""
from __future__ import annotations

import logging
from abc import ABCMeta, abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar, Hashable, Iterator

from .collection import SymbolResultSet
from .config import global_config
from .exceptions import InvalidSymbol
from .i18n import lang
from .model import ParseError, Token, TokenType
from .symbol import Argument

if TYPE_CHECKING:
    from .messages import ValidationMessages
    from .symbol import ArgumentLike, Command, Option, Symbol

logger = logging.getLogger(__name__)


class DefaultValueCache:
    """默认值缓存表, 由根结果持有并在整棵树中共享

    以 (解析结果, 参数) 为键; 同一棵树中的条目一旦写入便不会失效.
    """

    __slots__ = ("_values",)

    def __init__(self):
        self._values: dict[tuple[SymbolResult, Hashable], Any] = {}

    def __contains__(self, key: tuple[SymbolResult, Hashable]) -> bool:
        return key in self._values

    def __len__(self) -> int:
        return len(self._values)

    def get(self, result: SymbolResult, argument: Hashable, default: Any = None) -> Any:
        return self._values.get((result, argument), default)

    def store(self, result: SymbolResult, argument: Hashable, value: Any) -> Any:
        self._values[(result, argument)] = value
        return value

    def arguments_of(self, result: SymbolResult) -> list[Hashable]:
        """返回在该结果上已解析过默认值的参数"""
        return [arg for res, arg in self._values if res is result]


class SymbolResult(metaclass=ABCMeta):
    """解析结果树的节点, 代表某个符号在一次解析中的一次匹配

    Attributes:
        symbol (Symbol): 该结果对应的符号
        parent (SymbolResult | None): 上级结果, 根结果为 None
        children (SymbolResultSet): 子结果集合
        error_message (str | None): 直接附加在该结果上的诊断文本
    """

    kind: ClassVar[str]

    __slots__ = ("symbol", "parent", "children", "error_message", "_tokens", "_validation_messages", "_default_values")

    def __init__(self, symbol: Symbol, parent: SymbolResult | None = None, attach: bool = True):
        """
        Args:
            symbol (Symbol): 该结果对应的符号
            parent (SymbolResult | None, optional): 上级结果
            attach (bool, optional): 是否将自身加入上级结果的子结果集合
        """
        if symbol is None:
            raise InvalidSymbol(lang.require("result", "symbol_missing"))
        self.symbol = symbol
        self.parent = parent
        self.children: SymbolResultSet[SymbolResult] = SymbolResultSet()
        self.error_message: str | None = None
        self._tokens: list[Token] = []
        self._validation_messages: ValidationMessages | None = None
        self._default_values = DefaultValueCache() if parent is None else parent._default_values
        if parent is not None and attach:
            parent.children.add(self)

    @property
    def tokens(self) -> tuple[Token, ...]:
        return tuple(self._tokens)

    @property
    def root(self) -> SymbolResult:
        node = self
        while node.parent is not None:
            node = node.parent
        return node

    @property
    def default_values(self) -> DefaultValueCache:
        """整棵树共享的默认值缓存表"""
        return self._default_values

    @property
    def validation_messages(self) -> ValidationMessages:
        """诊断文本提供者

        自身设置过时使用自身的, 否则沿上级结果查找, 根结果回退到全局默认值.
        """
        node = self
        while node._validation_messages is None:
            if node.parent is None:
                return global_config.messages
            node = node.parent
        return node._validation_messages

    @validation_messages.setter
    def validation_messages(self, value: ValidationMessages | None):
        self._validation_messages = value

    def add_token(self, token: Token) -> None:
        self._tokens.append(token)

    def maximum_argument_capacity(self) -> int:
        return sum(argument.arity.maximum for argument in self.symbol.arguments())

    @property
    def remaining_argument_capacity(self) -> int:
        return self.maximum_argument_capacity() - len(self._tokens)

    @property
    def is_argument_limit_reached(self) -> bool:
        return self.remaining_argument_capacity <= 0

    def get_default_value_for(self, argument: ArgumentLike) -> Any:
        """获取参数的默认值, 首次获取后写入缓存

        Args:
            argument (ArgumentLike): 目标参数

        Returns:
            Any: 默认值
        """
        key = (self, argument)
        if key in self._default_values:
            return self._default_values.get(self, argument)
        if isinstance(argument, Argument):
            value = self._create_default_argument_result_and_get_its_value(argument)
        else:
            value = argument.get_default_value()
        logger.debug("resolved default value %r for %r on %s", value, argument, self)
        return self._default_values.store(self, argument, value)

    def _create_default_argument_result_and_get_its_value(self, argument: Argument) -> Any:
        result = self.children.result_for(argument)
        if not isinstance(result, ArgumentResult):
            result = ArgumentResult(argument, self, attach=False)
        return argument.get_default_value(result)

    def use_default_value_for(self, argument: ArgumentLike) -> bool:
        """判断绑定时该参数的值是否应视为默认值而非用户输入"""
        if isinstance(self, OptionResult) and self.is_implicit:
            return True
        if isinstance(self, CommandResult):
            child = self.children.result_for(argument)  # type: ignore
            if child is not None and all(token.is_implicit for token in child._tokens):
                return True
        return (self, argument) in self._default_values

    def unrecognized_argument_error(self, argument: ArgumentLike) -> ParseError | None:
        """返回第一个不在允许取值中的输入单元对应的诊断信息"""
        allowed = argument.allowed_values
        if allowed and self._tokens:
            for token in self._tokens:
                if token.value not in allowed:
                    return ParseError(self.validation_messages.unrecognized_argument(token.value, allowed), self)
        return None

    @abstractmethod
    def token(self) -> Token | None:
        """返回该结果的代表输入单元"""

    def __str__(self):
        token = self.token()
        return f"{self.__class__.__name__}: {token.value if token is not None else self.symbol.name}"

    def __repr__(self):
        return f"<{self}>"


class CommandResult(SymbolResult):
    """命令的解析结果"""

    kind = "command"

    __slots__ = ("_token",)

    def __init__(
        self,
        command: Command,
        token: Token | None = None,
        parent: CommandResult | None = None,
        messages: ValidationMessages | None = None,
    ):
        super().__init__(command, parent)
        if token is None:
            token = Token(command.name, TokenType.COMMAND)
        self._token = token
        if messages is not None:
            self._validation_messages = messages

    @property
    def command(self) -> Command:
        return self.symbol  # type: ignore

    def token(self) -> Token | None:
        return self._token

    def walk(self) -> Iterator[SymbolResult]:
        """先序遍历该结果及其全部后代"""
        yield self
        yield from _walk_children(self)

    def find_result_for(self, symbol: Symbol) -> SymbolResult | None:
        """在后代中深度优先查找该符号的结果"""
        for result in self.walk():
            if result is not self and result.symbol is symbol:
                return result
        return None


def _walk_children(result: SymbolResult) -> Iterator[SymbolResult]:
    for child in result.children:
        yield child
        yield from _walk_children(child)


class OptionResult(SymbolResult):
    """选项的解析结果

    Attributes:
        is_implicit (bool): 该选项是否由解析器推断而非在输入中显式出现
    """

    kind = "option"

    __slots__ = ("_token", "is_implicit")

    def __init__(
        self,
        option: Option,
        token: Token | None = None,
        parent: SymbolResult | None = None,
        is_implicit: bool = False,
    ):
        super().__init__(option, parent)
        if token is None and not is_implicit:
            token = Token(option.name, TokenType.OPTION)
        self._token = token
        self.is_implicit = is_implicit

    @property
    def option(self) -> Option:
        return self.symbol  # type: ignore

    def token(self) -> Token | None:
        return self._token


class ArgumentResult(SymbolResult):
    """参数的解析结果"""

    kind = "argument"

    __slots__ = ()

    def __init__(self, argument: Argument, parent: SymbolResult | None = None, attach: bool = True):
        super().__init__(argument, parent, attach)

    @property
    def argument(self) -> Argument:
        return self.symbol  # type: ignore

    def token(self) -> Token | None:
        return self._tokens[0] if self._tokens else None

    def arity_error(self) -> ParseError | None:
        """检查该参数的输入单元数量是否满足其元数, 默认值的判断交由上级结果"""
        return self.argument.arity.validate(self, self.argument, self.parent)


__all__ = ["DefaultValueCache", "SymbolResult", "CommandResult", "OptionResult", "ArgumentResult"]
