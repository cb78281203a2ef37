"""ResultTree 错误相关"""


class ResultTreeException(Exception):
    """ResultTree 异常基类"""


class InvalidSymbol(ResultTreeException, ValueError):
    """构造解析结果或参数元数时传入的内容不正确"""


class DuplicateResult(ResultTreeException, KeyError):
    """同一结果集合中已存在该符号的解析结果"""

    def __str__(self):
        return str(self.args[0]) if self.args else ""
