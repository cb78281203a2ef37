"""ResultTree 诊断文本相关"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar, Iterable, Mapping

from .i18n import lang

if TYPE_CHECKING:
    from .result import SymbolResult


class ValidationMessages:
    """为已知的诊断类型生成可读文本

    默认从 `validation` 消息域中读取模板; 可以通过 `templates` 覆盖单条模板 (键为消息类型, 如 `unrecognized_argument`, `kind.command`), 或通过 `locale` 固定语言类型.
    子类可以重写任意方法以完全接管某类诊断的文本.

    Attributes:
        instance (ValidationMessages): 进程级的默认实例
    """

    instance: ClassVar[ValidationMessages]

    __slots__ = ("templates", "locale")

    def __init__(self, templates: Mapping[str, str] | None = None, locale: str | None = None):
        self.templates = dict(templates or {})
        self.locale = locale

    def __repr__(self):
        return f"{self.__class__.__name__}(templates={self.templates!r}, locale={self.locale!r})"

    def _require(self, type: str) -> str:
        if type in self.templates:
            return self.templates[type]
        return lang.require("validation", type, self.locale)

    def _format(self, type: str, **kwargs: Any) -> str:
        return self._require(type).format(**kwargs)

    def _describe(self, result: SymbolResult) -> dict[str, str]:
        token = result.token()
        return {
            "kind": self._require(f"kind.{result.kind}"),
            "target": token.value if token is not None else result.symbol.name,
        }

    def unrecognized_argument(self, value: str, allowed_values: Iterable[str]) -> str:
        """参数值不在允许的取值集合中

        Args:
            value (str): 不合法的值
            allowed_values (Iterable[str]): 允许的取值
        """
        allowed = "".join(f"\n\t'{v}'" for v in allowed_values)
        return self._format("unrecognized_argument", value=value, allowed=allowed)

    def unrecognized_command_or_argument(self, value: str) -> str:
        return self._format("unrecognized_command_or_argument", value=value)

    def expects_one_argument(self, result: SymbolResult) -> str:
        return self._format("expects_one_argument", count=len(result.tokens), **self._describe(result))

    def too_many_arguments(self, result: SymbolResult, maximum: int | None = None) -> str:
        return self._format(
            "too_many_arguments",
            count=len(result.tokens),
            maximum=result.maximum_argument_capacity() if maximum is None else maximum,
            **self._describe(result),
        )

    def no_argument_provided(self, result: SymbolResult) -> str:
        return self._format("no_argument_provided", **self._describe(result))

    def required_argument_missing(self, result: SymbolResult) -> str:
        return self._format("required_argument_missing", **self._describe(result))


ValidationMessages.instance = ValidationMessages()

__all__ = ["ValidationMessages"]
