"""枚举成员别名元数据.

提供别名的声明与查询:
    - `enum_member` 装饰器: 在枚举类上声明 `{成员名: 别名}`.
    - `register_aliases`: 为无法修改源码的枚举 (如标准库枚举) 注册别名.

别名查询对异常元数据是宽容的: 非字符串或空字符串的别名一律视为 "无别名".
"""

import threading
from collections.abc import Callable, Iterator, Mapping
from enum import Enum, Flag
from typing import Any, TypeVar

from .log import logger

#: 装饰器写入枚举类的属性名.
ALIAS_ATTR = "__enum_member_aliases__"

E = TypeVar("E", bound=type[Enum])

_registry: dict[type, dict[str, Any]] = {}
_registry_lock = threading.Lock()


def enum_member(
    aliases: Mapping[str, str] | None = None, /, **named: str
) -> Callable[[E], E]:
    """装饰器: 为枚举成员声明别名.

    别名可以通过映射或关键字参数给出, 两者同时给出时关键字参数优先.
    未列出的成员没有别名, 写出时使用整数编码.

    Args:
        aliases: `{成员名: 别名}` 映射.
        **named: 以成员名为关键字的别名.

    Usage:
        ```python
        @enum_member(ACTIVE="active", INACTIVE="inactive")
        class Status(IntEnum):
            ACTIVE = 1
            INACTIVE = 2
            UNKNOWN = 99
        ```
    """
    table = {**(aliases or {}), **named}

    def decorator(cls: E) -> E:
        if not (isinstance(cls, type) and issubclass(cls, Enum)):
            from .exceptions import EnumMemberTypeError

            raise EnumMemberTypeError(
                f"@enum_member can only decorate Enum subclasses, got {cls!r}"
            )
        setattr(cls, ALIAS_ATTR, dict(table))
        _invalidate_index(cls)
        return cls

    return decorator


def register_aliases(enum_type: type[Enum], aliases: Mapping[str, str]) -> None:
    """为枚举类型注册别名表.

    注册表中的条目覆盖类上通过 `enum_member` 声明的同名别名.
    重复注册会与已有条目合并. 已缓存的索引会被失效.

    Args:
        enum_type: 目标枚举类型.
        aliases: `{成员名: 别名}` 映射.
    """
    with _registry_lock:
        _registry.setdefault(enum_type, {}).update(aliases)
    _invalidate_index(enum_type)


def unregister_aliases(enum_type: type[Enum]) -> None:
    """移除枚举类型在注册表中的全部别名."""
    with _registry_lock:
        _registry.pop(enum_type, None)
    _invalidate_index(enum_type)


def get_alias(enum_type: type[Enum], name: str) -> str | None:
    """查询成员的别名.

    Args:
        enum_type: 枚举类型.
        name: 成员名.

    Returns:
        别名文本; 未声明或声明无效时返回 None.
    """
    registered = _registry.get(enum_type)
    if registered is not None and name in registered:
        raw = registered[name]
    else:
        declared = getattr(enum_type, ALIAS_ATTR, None)
        if not isinstance(declared, Mapping):
            return None
        raw = declared.get(name)

    if raw is None:
        return None
    if not isinstance(raw, str) or not raw:
        logger.debug(
            "[get_alias] 忽略 %s.%s 的无效别名: %r", enum_type.__name__, name, raw
        )
        return None
    return raw


def iter_constants(enum_type: type[Enum]) -> Iterator[tuple[str, Enum, int]]:
    """按声明顺序遍历枚举常量.

    包含值重复的成员名 (它们指向同一个规范成员).

    Yields:
        tuple[str, Enum, int]: (成员名, 成员, 整数编码).
    """
    for name, member in enum_type.__members__.items():
        yield name, member, int(member.value)


def is_int_enum(tp: Any) -> bool:
    """判断类型是否为整数枚举.

    要求是 `Enum` 子类, 不是 `Flag` 子类, 且所有成员值都是 int (bool 除外).
    """
    if not isinstance(tp, type) or not issubclass(tp, Enum) or issubclass(tp, Flag):
        return False
    return all(
        isinstance(member.value, int) and not isinstance(member.value, bool)
        for member in tp.__members__.values()
    )


def _invalidate_index(enum_type: type) -> None:
    from .index import EnumMetadataIndex

    EnumMetadataIndex.invalidate(enum_type)
