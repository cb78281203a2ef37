"""ResultTree 所消费的符号声明"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Protocol, runtime_checkable
from typing_extensions import Self

from tarina import Empty

from .exceptions import InvalidSymbol
from .i18n import lang
from .model import ParseError

if TYPE_CHECKING:
    from .result import ArgumentResult, SymbolResult

MAXIMUM_ARITY = 100000


@dataclass(eq=True, frozen=True)
class ArgumentArity:
    """参数可接受的输入单元数量范围

    Attributes:
        minimum (int): 最少需要的数量
        maximum (int): 最多允许的数量
    """

    minimum: int
    maximum: int

    ZERO: ClassVar[ArgumentArity]
    ZERO_OR_ONE: ClassVar[ArgumentArity]
    EXACTLY_ONE: ClassVar[ArgumentArity]
    ZERO_OR_MORE: ClassVar[ArgumentArity]
    ONE_OR_MORE: ClassVar[ArgumentArity]

    def __post_init__(self):
        if self.minimum < 0 or self.maximum < 0:
            raise InvalidSymbol(lang.require("symbol", "arity.negative").format(minimum=self.minimum, maximum=self.maximum))
        if self.minimum > self.maximum:
            raise InvalidSymbol(lang.require("symbol", "arity.order").format(minimum=self.minimum, maximum=self.maximum))

    def __iter__(self):
        return iter((self.minimum, self.maximum))

    def validate(
        self, result: SymbolResult, argument: ArgumentLike, owner: SymbolResult | None = None
    ) -> ParseError | None:
        """检查解析结果的输入单元数量是否满足该范围

        数量不足时, 若所属结果认为该参数应使用默认值则不视为错误.

        Args:
            result (SymbolResult): 持有输入单元的解析结果
            argument (ArgumentLike): 被检查的参数
            owner (SymbolResult | None, optional): 判断默认值的所属结果, 默认为 `result` 本身

        Returns:
            ParseError | None: 不满足时返回诊断信息
        """
        count = len(result.tokens)
        messages = result.validation_messages
        if count < self.minimum:
            if (result if owner is None else owner).use_default_value_for(argument):
                return None
            if count == 0 and result.kind != "command":
                return ParseError(messages.no_argument_provided(result), result)
            return ParseError(messages.required_argument_missing(result), result)
        if count > self.maximum:
            if self.maximum == 1:
                return ParseError(messages.expects_one_argument(result), result)
            return ParseError(messages.too_many_arguments(result, self.maximum), result)
        return None


ArgumentArity.ZERO = ArgumentArity(0, 0)
ArgumentArity.ZERO_OR_ONE = ArgumentArity(0, 1)
ArgumentArity.EXACTLY_ONE = ArgumentArity(1, 1)
ArgumentArity.ZERO_OR_MORE = ArgumentArity(0, MAXIMUM_ARITY)
ArgumentArity.ONE_OR_MORE = ArgumentArity(1, MAXIMUM_ARITY)


@runtime_checkable
class ArgumentLike(Protocol):
    """参数声明协议"""

    name: str
    arity: ArgumentArity

    @property
    def allowed_values(self) -> Iterable[str]: ...

    @property
    def has_default_value(self) -> bool: ...

    def get_default_value(self) -> Any: ...


class Symbol:
    """命令, 选项与参数的共同基类

    符号按身份比较与哈希, 以便作为结果集合与默认值缓存的键.
    """

    kind: ClassVar[str] = "symbol"

    __slots__ = ("name", "aliases", "description", "hidden")

    def __init__(self, name: str, aliases: Iterable[str] = (), description: str | None = None, hidden: bool = False):
        if not isinstance(name, str) or not name.strip():
            raise InvalidSymbol(lang.require("symbol", "name_empty"))
        self.name = name
        self.aliases = frozenset({name, *aliases})
        self.description = description
        self.hidden = hidden

    def __repr__(self):
        return f"{self.__class__.__name__}({self.name!r})"

    def has_alias(self, alias: str) -> bool:
        return alias in self.aliases

    def arguments(self) -> tuple[Argument, ...]:
        """返回该符号声明的参数"""
        return ()


DefaultResolver = Callable[["ArgumentResult"], Any]


class Argument(Symbol):
    """参数声明

    Attributes:
        arity (ArgumentArity): 可接受的输入单元数量范围
        allowed_values (tuple[str, ...]): 允许的取值, 为空时不做限制
        default (Any): 默认值, 未设置时为 `Empty`
        default_factory (Callable[[], Any] | None): 默认值工厂
        default_resolver (Callable[[ArgumentResult], Any] | None): 依赖解析上下文的默认值工厂
    """

    kind = "argument"

    __slots__ = ("arity", "allowed_values", "default", "default_factory", "default_resolver")

    def __init__(
        self,
        name: str,
        arity: ArgumentArity | tuple[int, int] | None = None,
        *,
        allowed_values: Iterable[str] = (),
        default: Any = Empty,
        default_factory: Callable[[], Any] | None = None,
        default_resolver: DefaultResolver | None = None,
        description: str | None = None,
        hidden: bool = False,
    ):
        super().__init__(name, (), description, hidden)
        self.allowed_values: tuple[str, ...] = tuple(dict.fromkeys(allowed_values))
        self.default = default
        self.default_factory = default_factory
        self.default_resolver = default_resolver
        if arity is None:
            arity = ArgumentArity.ZERO_OR_ONE if self.has_default_value else ArgumentArity.EXACTLY_ONE
        elif not isinstance(arity, ArgumentArity):
            arity = ArgumentArity(*arity)
        self.arity = arity

    @property
    def has_default_value(self) -> bool:
        return self.default is not Empty or self.default_factory is not None or self.default_resolver is not None

    def add_allowed_values(self, *values: str) -> Self:
        """追加允许的取值"""
        self.allowed_values = tuple(dict.fromkeys((*self.allowed_values, *values)))
        return self

    def set_default(self, value: Any) -> Self:
        self.default = value
        return self

    def set_default_factory(self, factory: Callable[[], Any]) -> Self:
        self.default_factory = factory
        return self

    def set_default_resolver(self, resolver: DefaultResolver) -> Self:
        self.default_resolver = resolver
        return self

    def get_default_value(self, result: ArgumentResult | None = None) -> Any:
        """获取默认值

        `default_resolver` 仅在传入解析上下文时生效, 其次为 `default_factory`, 最后为 `default`.

        Args:
            result (ArgumentResult | None): 该参数的解析上下文
        """
        if self.default_resolver is not None and result is not None:
            return self.default_resolver(result)
        if self.default_factory is not None:
            return self.default_factory()
        return None if self.default is Empty else self.default

    def arguments(self) -> tuple[Argument, ...]:
        return (self,)


class Option(Symbol):
    """选项声明"""

    kind = "option"

    __slots__ = ("_arguments", "required")

    def __init__(
        self,
        name: str,
        *arguments: Argument,
        aliases: Iterable[str] = (),
        required: bool = False,
        description: str | None = None,
        hidden: bool = False,
    ):
        super().__init__(name, aliases, description, hidden)
        self._arguments = list(arguments)
        self.required = required

    def add_argument(self, argument: Argument) -> Self:
        self._arguments.append(argument)
        return self

    def arguments(self) -> tuple[Argument, ...]:
        return tuple(self._arguments)


class Command(Symbol):
    """命令声明, 可以包含参数, 选项与子命令"""

    kind = "command"

    __slots__ = ("_children",)

    def __init__(
        self,
        name: str,
        *children: Argument | Option | Command,
        aliases: Iterable[str] = (),
        description: str | None = None,
        hidden: bool = False,
    ):
        super().__init__(name, aliases, description, hidden)
        self._children: list[Symbol] = []
        for child in children:
            self.add(child)

    def add(self, child: Argument | Option | Command) -> Self:
        if not isinstance(child, (Argument, Option, Command)):
            raise InvalidSymbol(lang.require("symbol", "child_type").format(target=repr(child)))
        self._children.append(child)
        return self

    @property
    def children(self) -> tuple[Symbol, ...]:
        return tuple(self._children)

    def arguments(self) -> tuple[Argument, ...]:
        return tuple(i for i in self._children if isinstance(i, Argument))

    def options(self) -> tuple[Option, ...]:
        return tuple(i for i in self._children if isinstance(i, Option))

    def subcommands(self) -> tuple[Command, ...]:
        return tuple(i for i in self._children if isinstance(i, Command))


__all__ = ["MAXIMUM_ARITY", "ArgumentArity", "ArgumentLike", "Symbol", "Argument", "Option", "Command"]
