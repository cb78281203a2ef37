from __future__ import annotations

import logging
from typing import ContextManager

from .i18n import lang as lang
from .messages import ValidationMessages

logger = logging.getLogger(__name__)


class messages_scope(ContextManager[ValidationMessages]):
    """暂时替换进程级的默认诊断文本提供者

    Example:
        >>> with messages_scope(ValidationMessages(locale="zh-CN")) as msgs:
        ...     root = CommandResult(cmd)
        ...     assert root.validation_messages is msgs
    """

    def __init__(self, messages: ValidationMessages):
        self.messages = messages

    def __enter__(self) -> ValidationMessages:
        self.old = global_config._messages
        global_config.messages = self.messages
        return self.messages

    def __exit__(self, exc_type, exc_val, exc_tb):
        global_config.messages = self.old
        del self.old
        if exc_type or exc_val or exc_tb:
            return False


class _ResultTreeConfig:
    """全局配置类"""

    _messages: ValidationMessages | None = None
    """默认诊断文本提供者, 为空时使用 `ValidationMessages.instance`"""

    @property
    def messages(self) -> ValidationMessages:
        return self._messages or ValidationMessages.instance

    @messages.setter
    def messages(self, value: ValidationMessages | None):
        logger.debug("default validation messages set to %r", value)
        self._messages = value

    @property
    def locale(self) -> str:
        """当前消息目录的语言类型"""
        return lang.current

    @locale.setter
    def locale(self, value: str):
        lang.select(value)


global_config = _ResultTreeConfig()

__all__ = ["global_config", "messages_scope", "lang"]
