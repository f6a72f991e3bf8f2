"""可空枚举适配器.

让同一个 `EnumCodec` (及其索引) 同时服务于 `E` 与 `E | None`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from .codec import EnumCodec, Token

E = TypeVar("E", bound=Enum)


class OptionalValueAdapter(Generic[E]):
    """`EnumCodec` 的可空包装.

    外部的缺省 Token 为 None (即 JSON `null`). 遇到 None 时不调用内部编解码器.
    """

    __slots__ = ("_codec",)

    def __init__(self, codec: EnumCodec[E]) -> None:
        self._codec = codec

    @property
    def codec(self) -> EnumCodec[E]:
        """被包装的编解码器."""
        return self._codec

    @property
    def enum_type(self) -> type[E]:
        """内部枚举类型."""
        return self._codec.enum_type

    def read(self, token: Any) -> E | None:
        """缺省 Token 返回 None, 其余委托给内部 `read`."""
        if token is None:
            return None
        return self._codec.read(token)

    def write(self, value: E | None) -> Token | None:
        """None 写出缺省 Token, 其余委托给内部 `write`."""
        if value is None:
            return None
        return self._codec.write(value)

    def __repr__(self) -> str:
        return f"OptionalValueAdapter({self._codec!r})"
