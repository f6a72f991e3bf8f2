"""pydantic 集成测试.

覆盖 enum_member.converter 模块的核心特性:
1. 模型字段的 JSON 读写
2. 可空字段
3. 非枚举类型回退到 pydantic 默认处理
4. JSON Schema
5. annotate 的类型改写
"""

from enum import IntEnum
from typing import Annotated, Optional, Union, get_args, get_origin

import pytest
from pydantic import BaseModel, ValidationError

from enum_member import (
    CodecSelector,
    Config,
    EnumMemberConverter,
    annotate,
    default_selector,
    enum_member,
)


@enum_member(ACTIVE="active", INACTIVE="inactive")
class Status(IntEnum):
    """账户状态."""

    ACTIVE = 1
    INACTIVE = 2
    UNKNOWN = 99


class Account(BaseModel):
    """带枚举字段的模型."""

    status: Annotated[Status, EnumMemberConverter()]
    previous: Annotated[Status | None, EnumMemberConverter()] = None


class Counter(BaseModel):
    """非枚举字段上的注解不生效."""

    count: Annotated[int, EnumMemberConverter()]


# --- 模型读写 ---


def test_model_validate_json_alias() -> None:
    """JSON 中的别名被解析为成员."""
    account = Account.model_validate_json('{"status": "active"}')

    assert account.status is Status.ACTIVE
    assert account.previous is None


def test_model_validate_json_numeric_and_name() -> None:
    """JSON 数字按编码解析, 成员名作为回退."""
    account = Account.model_validate_json('{"status": 99, "previous": "INACTIVE"}')

    assert account.status is Status.UNKNOWN
    assert account.previous is Status.INACTIVE


def test_model_validate_json_null() -> None:
    """可空字段接受 JSON null."""
    account = Account.model_validate_json('{"status": "inactive", "previous": null}')

    assert account.previous is None


def test_model_dump_json() -> None:
    """JSON 模式写出别名或整数编码."""
    account = Account(status=Status.ACTIVE, previous=Status.UNKNOWN)

    assert account.model_dump_json() == '{"status":"active","previous":99}'
    assert Account(status=Status.UNKNOWN).model_dump_json() == (
        '{"status":99,"previous":null}'
    )


def test_model_dump_python_keeps_members() -> None:
    """Python 模式保留成员本身, json 模式写出 Token."""
    account = Account(status=Status.INACTIVE)

    assert account.model_dump() == {"status": Status.INACTIVE, "previous": None}
    assert account.model_dump(mode="json") == {"status": "inactive", "previous": None}


def test_model_accepts_members_directly() -> None:
    """直接传入成员无需解析."""
    account = Account(status=Status.UNKNOWN, previous=Status.ACTIVE)

    assert account.status is Status.UNKNOWN
    assert account.previous is Status.ACTIVE


@pytest.mark.parametrize("payload", ['{"status": "bogus"}', '{"status": 5}', '{"status": true}'])
def test_model_rejects_unsupported(payload: str) -> None:
    """无法解析的 Token 转换为 ValidationError."""
    with pytest.raises(ValidationError, match="not supported by Status"):
        Account.model_validate_json(payload)


def test_model_rejects_null_for_required_enum() -> None:
    """非可空字段不接受 null."""
    with pytest.raises(ValidationError):
        Account.model_validate_json('{"status": null}')


def test_roundtrip_through_model() -> None:
    """写出的 JSON 可以原样读回."""
    for member in Status:
        account = Account(status=member, previous=member)
        assert Account.model_validate_json(account.model_dump_json()) == account


def test_non_enum_field_falls_back() -> None:
    """不适用的类型交还给 pydantic 默认处理."""
    assert Counter.model_validate_json('{"count": 3}').count == 3
    with pytest.raises(ValidationError):
        Counter.model_validate_json('{"count": "many"}')


def test_converter_with_config() -> None:
    """配置中的数字类型影响写出."""
    converter = EnumMemberConverter(Config.from_params(extra_numeric_types=[Status]))

    class Numeric(BaseModel):
        status: Annotated[Status, converter]

    assert Numeric(status=Status.ACTIVE).model_dump_json() == '{"status":1}'
    assert Numeric.model_validate_json('{"status": "active"}').status is Status.ACTIVE


def test_converter_selector_defaults() -> None:
    """未提供配置时共享默认选择器."""
    assert EnumMemberConverter().selector is default_selector
    shared = CodecSelector()
    assert EnumMemberConverter(selector=shared).selector is shared


# --- JSON Schema ---


def test_json_schema_lists_wire_values() -> None:
    """JSON Schema 列出全部写出值, 可空字段包含 null."""
    properties = Account.model_json_schema()["properties"]

    assert properties["status"]["enum"] == ["active", "inactive", 99]
    assert properties["previous"]["enum"] == ["active", "inactive", 99, None]


# --- annotate ---


def _is_converted(tp) -> bool:
    return get_origin(tp) is Annotated and isinstance(
        get_args(tp)[1], EnumMemberConverter
    )


def test_annotate_enum() -> None:
    """枚举与可空枚举被包上注解."""
    assert _is_converted(annotate(Status))
    assert _is_converted(annotate(Optional[Status]))
    assert get_args(annotate(Status | None))[0] == (Status | None)


def test_annotate_leaves_other_types() -> None:
    """不含枚举的类型保持原样."""
    assert annotate(int) is int
    assert annotate(list[int]) == list[int]


def test_annotate_containers() -> None:
    """容器中的枚举位置被逐一改写."""
    listed = annotate(list[Status])
    assert get_origin(listed) is list
    assert _is_converted(get_args(listed)[0])

    mapped = annotate(dict[str, Status | None])
    key, value = get_args(mapped)
    assert key is str
    assert _is_converted(value)

    variadic = annotate(tuple[Status, ...])
    assert _is_converted(get_args(variadic)[0])
    assert get_args(variadic)[1] is Ellipsis


def test_annotate_union_and_annotated() -> None:
    """Union 与 Annotated 内部同样被改写."""
    union = annotate(Union[Status, int])
    assert _is_converted(get_args(union)[0])
    assert get_args(union)[1] is int

    nested = annotate(Annotated[list[Status], "meta"])
    inner, meta = get_args(nested)
    assert meta == "meta"
    assert _is_converted(get_args(inner)[0])
