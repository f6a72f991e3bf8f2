"""enum_member 配置对象."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from http import HTTPStatus

from .options import Option

#: 默认始终以数字形式写出的枚举类型.
DEFAULT_NUMERIC_TYPES: frozenset[type] = frozenset({HTTPStatus})


@dataclass(frozen=True)
class Config:
    """编解码配置 (不可变).

    在 API 入口层 (`CodecSelector`, `EnumMemberConverter`, `EnumTypeAdapter`) 创建,
    然后传递给各个 `EnumCodec`.

    Attributes:
        flags: 选项标志 (IntFlag).
        numeric_types: 始终写出整数编码的枚举类型集合, 即使成员带有别名.
    """

    flags: Option = Option.NONE
    numeric_types: frozenset[type] = field(default=DEFAULT_NUMERIC_TYPES)

    @classmethod
    def from_params(
        cls,
        option: Option = Option.NONE,
        numeric_types: Iterable[type] | None = None,
        extra_numeric_types: Iterable[type] = (),
    ) -> "Config":
        """从参数构建配置对象.

        Args:
            option: Option 枚举.
            numeric_types: 替换默认的数字类型集合. 为 None 时使用 `DEFAULT_NUMERIC_TYPES`.
            extra_numeric_types: 追加到数字类型集合中的类型.

        Returns:
            Config: 配置对象.
        """
        base = DEFAULT_NUMERIC_TYPES if numeric_types is None else numeric_types
        return cls(
            flags=Option(option),
            numeric_types=frozenset(base) | frozenset(extra_numeric_types),
        )

    @property
    def numeric_alias_match(self) -> bool:
        """数字 Token 是否先与别名文本比较."""
        return bool(self.flags & Option.NUMERIC_ALIAS_MATCH)

    @property
    def option(self) -> int:
        """返回 int 形式的 option 值."""
        return int(self.flags)

    def is_numeric_type(self, enum_type: type) -> bool:
        """判断该枚举类型是否始终以数字形式写出."""
        return enum_type in self.numeric_types


DEFAULT_CONFIG = Config()
