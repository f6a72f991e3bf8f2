"""枚举编解码器.

`EnumCodec` 在给定的 `EnumMetadataIndex` 上实现读取 (Token -> 成员)
与写出 (成员 -> Token) 两个算法. 自身不持有可变状态.
"""

import re
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from .exceptions import EnumMemberTypeError, UnsupportedValueError
from .index import EnumMetadataIndex
from .log import format_token, logger
from .member import is_int_enum
from .options import Option

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

#: JSON 标量 Token: 字符串或整数.
Token = str | int

_INT_LITERAL = re.compile(r"[+-]?[0-9]+")


class Codec(Protocol[T]):
    """宿主序列化引擎调用的编解码接口."""

    @property
    def enum_type(self) -> type[Enum]:
        """编解码器服务的枚举类型."""
        ...

    def read(self, token: Any) -> T:
        """将外部 Token 还原为值."""
        ...

    def write(self, value: T) -> Any:
        """将值转换为外部 Token."""
        ...


class EnumCodec(Generic[E]):
    """整数枚举的编解码器.

    读取规则:
        1. 字符串 Token 先按别名匹配; 数字 Token 直接按整数编码匹配.
        2. 否则按成员名 (区分大小写) 或 ASCII 十进制整数字面量解析, 两者都忽略首尾空白.
        3. 都失败时抛出 `UnsupportedValueError`.

    写出规则:
        - 类型被标记为 `serialize_as_numeric`, 或成员没有别名: 写出整数编码.
        - 否则写出别名文本.

    Examples:
        >>> codec = EnumCodec(Status)
        >>> codec.write(Status.ACTIVE)
        'active'
        >>> codec.read(99)
        <Status.UNKNOWN: 99>
    """

    __slots__ = ("_enum_type", "_index", "_option", "_serialize_as_numeric")

    def __init__(
        self,
        enum_type: type[E],
        *,
        serialize_as_numeric: bool = False,
        option: Option = Option.NONE,
        index: EnumMetadataIndex[E] | None = None,
    ) -> None:
        """初始化编解码器.

        Args:
            enum_type: 整数枚举类型.
            serialize_as_numeric: 是否始终写出整数编码, 忽略别名.
            option: 读取选项.
            index: 预先构建的索引; 为 None 时使用进程级缓存.

        Raises:
            EnumMemberTypeError: `enum_type` 不是整数枚举, 或索引类型不匹配.
        """
        if not is_int_enum(enum_type):
            raise EnumMemberTypeError(f"{enum_type!r} is not an integer-backed Enum")
        if index is None:
            index = EnumMetadataIndex.for_type(enum_type)
        elif index.enum_type is not enum_type:
            raise EnumMemberTypeError(
                f"Index for {index.enum_type.__name__} cannot serve {enum_type.__name__}"
            )

        self._enum_type = enum_type
        self._index = index
        self._option = Option(option)
        self._serialize_as_numeric = serialize_as_numeric

    @property
    def enum_type(self) -> type[E]:
        """绑定的枚举类型."""
        return self._enum_type

    @property
    def index(self) -> EnumMetadataIndex[E]:
        """绑定的元数据索引."""
        return self._index

    @property
    def serialize_as_numeric(self) -> bool:
        """是否始终写出整数编码."""
        return self._serialize_as_numeric

    def read(self, token: Any) -> E:
        """将 Token 解析为枚举成员.

        Args:
            token: 字符串或整数 Token.

        Returns:
            E: 解析出的枚举成员.

        Raises:
            UnsupportedValueError: Token 类型不受支持或无法解析.
        """
        if isinstance(token, bool) or not isinstance(token, str | int):
            raise UnsupportedValueError(token, self._enum_type)

        if isinstance(token, str):
            record = self._index.find_alias(token)
        else:
            code = int(token)
            record = None
            if self._option & Option.NUMERIC_ALIAS_MATCH:
                try:
                    record = self._index.find_alias(str(code))
                except ValueError as e:
                    # 超出 int -> str 的位数上限
                    raise UnsupportedValueError(token, self._enum_type) from e
            if record is None:
                record = self._index.find_code(code)

        if record is not None:
            return record.value

        if isinstance(token, str):
            value = self._parse(token)
        else:
            value = self._from_code(code)
        if value is None:
            logger.debug(
                "[EnumCodec] %s 无法解析 %s", self._enum_type.__name__, format_token(token)
            )
            raise UnsupportedValueError(token, self._enum_type)
        return value

    def write(self, value: E) -> Token:
        """将枚举成员转换为 Token.

        Args:
            value: 枚举成员.

        Returns:
            str | int: 别名文本或整数编码.

        Raises:
            UnsupportedValueError: 值不属于该枚举, 或索引中没有对应记录.
        """
        record = self._index.get(value)
        if record is None:
            raise UnsupportedValueError(value, self._enum_type)

        if self._serialize_as_numeric or record.alias_text is None:
            return record.numeric_code
        return record.alias_text

    def _parse(self, text: str) -> E | None:
        """按成员名或十进制整数字面量解析文本, 两者都忽略首尾空白."""
        text = text.strip()
        member = self._enum_type.__members__.get(text)
        if member is not None:
            logger.debug(
                "[EnumCodec] %s 按成员名解析 %r", self._enum_type.__name__, text
            )
            return member

        if _INT_LITERAL.fullmatch(text) is None:
            return None
        try:
            code = int(text)
        except ValueError:
            return None
        member = self._from_code(code)
        if member is not None:
            logger.debug(
                "[EnumCodec] %s 按整数字面量解析 %r", self._enum_type.__name__, text
            )
        return member

    def _from_code(self, code: int) -> E | None:
        """按整数编码构造成员, 未声明的编码交由枚举自身的 _missing_ 处理."""
        record = self._index.find_code(code)
        if record is not None:
            return record.value
        try:
            return self._enum_type(code)
        except ValueError:
            return None

    def __repr__(self) -> str:
        return (
            f"EnumCodec({self._enum_type.__name__}, "
            f"serialize_as_numeric={self._serialize_as_numeric})"
        )
