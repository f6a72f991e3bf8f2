"""枚举元数据索引.

每个枚举类型构建一次, 保存成员 -> (别名, 整数编码) 的不可变映射.
"""

import sys
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Generic, TypeVar

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from .exceptions import EnumMemberTypeError
from .log import logger
from .member import get_alias, is_int_enum, iter_constants

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class EnumConstantRecord:
    """单个枚举常量的记录.

    Attributes:
        value: 枚举成员本身.
        alias_text: 别名文本, 未声明时为 None.
        numeric_code: 成员的整数编码.
    """

    value: Enum
    alias_text: str | None
    numeric_code: int


class EnumMetadataIndex(Generic[E]):
    """枚举成员到 `EnumConstantRecord` 的不可变映射.

    通过 `for_type` 获取的实例在进程内按类型缓存, 首次构建在锁内完成,
    之后只读, 多线程并发读取无需加锁.

    Examples:
        >>> index = EnumMetadataIndex.for_type(Status)
        >>> index.get(Status.ACTIVE).alias_text
        'active'
    """

    __slots__ = ("_by_alias", "_by_code", "_enum_type", "_records")

    _cache: ClassVar[dict[type, "EnumMetadataIndex[Any]"]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(
        self, enum_type: type[E], records: dict[E, EnumConstantRecord]
    ) -> None:
        self._enum_type = enum_type
        self._records = records

        # 同一别名出现在多个成员上时, 以先声明者为准
        self._by_alias: dict[str, EnumConstantRecord] = {}
        self._by_code: dict[int, EnumConstantRecord] = {}
        for record in records.values():
            if record.alias_text is not None:
                self._by_alias.setdefault(record.alias_text, record)
            self._by_code.setdefault(record.numeric_code, record)

    @classmethod
    def build(cls, enum_type: type[E]) -> Self:
        """扫描枚举类型并构建索引.

        按声明顺序遍历全部成员名 (包括值重复的成员名), 以成员为键写入记录,
        后处理的成员名覆盖先前记录.

        Args:
            enum_type: 整数枚举类型.

        Returns:
            EnumMetadataIndex: 新构建的索引.

        Raises:
            EnumMemberTypeError: `enum_type` 不是整数枚举.
        """
        if not is_int_enum(enum_type):
            raise EnumMemberTypeError(f"{enum_type!r} is not an integer-backed Enum")

        records: dict[E, EnumConstantRecord] = {}
        for name, member, code in iter_constants(enum_type):
            records[member] = EnumConstantRecord(
                value=member, alias_text=get_alias(enum_type, name), numeric_code=code
            )

        logger.debug(
            "[EnumMetadataIndex] 构建 %s: %d 条记录", enum_type.__name__, len(records)
        )
        return cls(enum_type, records)

    @classmethod
    def for_type(cls, enum_type: type[E]) -> "EnumMetadataIndex[E]":
        """获取枚举类型的缓存索引, 不存在时构建."""
        index = cls._cache.get(enum_type)
        if index is not None:
            return index
        with cls._lock:
            index = cls._cache.get(enum_type)
            if index is None:
                index = cls.build(enum_type)
                cls._cache[enum_type] = index
        return index

    @classmethod
    def invalidate(cls, enum_type: type | None = None) -> None:
        """失效缓存的索引.

        Args:
            enum_type: 要失效的类型; 为 None 时清空全部缓存.
        """
        with cls._lock:
            if enum_type is None:
                cls._cache.clear()
            else:
                cls._cache.pop(enum_type, None)

    @property
    def enum_type(self) -> type[E]:
        """索引对应的枚举类型."""
        return self._enum_type

    def get(self, value: Any) -> EnumConstantRecord | None:
        """按成员查找记录. 非本类型成员返回 None."""
        if not isinstance(value, self._enum_type):
            return None
        return self._records.get(value)

    def find_alias(self, text: str) -> EnumConstantRecord | None:
        """按别名文本查找记录."""
        return self._by_alias.get(text)

    def find_code(self, code: int) -> EnumConstantRecord | None:
        """按整数编码查找记录."""
        return self._by_code.get(code)

    def __iter__(self) -> Iterator[EnumConstantRecord]:
        return iter(self._records.values())

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, value: object) -> bool:
        return self.get(value) is not None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EnumMetadataIndex):
            return NotImplemented
        return self._enum_type is other._enum_type and self._records == other._records

    def __hash__(self) -> int:
        return hash(self._enum_type)

    def __repr__(self) -> str:
        return f"EnumMetadataIndex({self._enum_type.__name__}, {len(self)} records)"
