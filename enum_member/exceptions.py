"""枚举编解码的异常类.

该模块为 enum_member 库定义了异常层次结构.
"""

from typing import Any

from .log import short_repr


class EnumMemberError(Exception):
    """所有 enum_member 异常的基类."""

    pass


class UnsupportedValueError(EnumMemberError, ValueError):
    """值无法被编解码时抛出.

    Case:
        - 读取时: Token 既不匹配任何别名, 也不是成员名或合法的整数编码.
        - 写入时: 值不属于绑定的枚举类型, 或索引中没有对应记录.

    继承 `ValueError`, 因此在 pydantic 校验器内抛出时会被转换为 `ValidationError`.
    """

    def __init__(self, value: Any, enum_type: type | None = None) -> None:
        """初始化错误.

        Args:
            value: 出错的 Token (读取) 或枚举值 (写入).
            enum_type: 绑定的枚举类型.
        """
        self.value = value
        self.enum_type = enum_type
        if enum_type is None:
            msg = f"Value {short_repr(value)} not supported."
        else:
            msg = f"Value {short_repr(value)} not supported by {enum_type.__name__}."
        super().__init__(msg)


class EnumMemberTypeError(EnumMemberError, TypeError):
    """传入的类型不是整数枚举时抛出."""

    pass
