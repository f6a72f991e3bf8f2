"""pydantic 集成.

`EnumMemberConverter` 作为 `typing.Annotated` 元数据使用,
为整数枚举 (及其可空包装) 生成使用 `EnumCodec` 的 pydantic core schema.
"""

import collections.abc
import types
from typing import Annotated, Any, Union, get_args, get_origin

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from .config import Config
from .optional import OptionalValueAdapter
from .selector import CodecSelector, default_selector

_JSON_SCHEMA_KEY = "enum_member_json_schema"

_CONTAINERS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        dict,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.Mapping,
        collections.abc.MutableMapping,
    }
)


class EnumMemberConverter:
    """按别名读写枚举的 pydantic 注解.

    不适用的类型 (非整数枚举) 交还给 pydantic 的默认处理.

    Examples:
        >>> class Account(BaseModel):
        ...     status: Annotated[Status, EnumMemberConverter()]
        ...     previous: Annotated[Status | None, EnumMemberConverter()] = None
        >>> Account(status="active").model_dump_json()
        '{"status":"active","previous":null}'
    """

    __slots__ = ("_selector",)

    def __init__(
        self, config: Config | None = None, *, selector: CodecSelector | None = None
    ) -> None:
        """初始化注解.

        Args:
            config: 编解码配置. 未提供 `selector` 时用于创建新的选择器.
            selector: 共享的选择器. 两者都未提供时使用 `default_selector`.
        """
        if selector is None:
            selector = default_selector if config is None else CodecSelector(config)
        self._selector = selector

    @property
    def selector(self) -> CodecSelector:
        """使用的编解码器选择器."""
        return self._selector

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        codec = self._selector.select(source_type)
        if codec is None:
            return handler(source_type)

        enum_type = codec.enum_type

        def validate(value: Any) -> Any:
            # Python 模式下直接传入的成员无需解析
            if isinstance(value, enum_type):
                return value
            return codec.read(value)

        if isinstance(codec, OptionalValueAdapter):
            inner = codec.codec
            wire_values: list[Any] = [inner.write(r.value) for r in inner.index]
            wire_values.append(None)
        else:
            wire_values = [codec.write(r.value) for r in codec.index]

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                codec.write, when_used="json"
            ),
            metadata={_JSON_SCHEMA_KEY: {"enum": wire_values}},
        )

    def __get_pydantic_json_schema__(
        self, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        metadata = schema.get("metadata") or {}
        json_schema = metadata.get(_JSON_SCHEMA_KEY)
        if json_schema is None:
            return handler(schema)
        return dict(json_schema)

    def __repr__(self) -> str:
        return f"EnumMemberConverter(config={self._selector.config!r})"


def annotate(tp: Any, converter: EnumMemberConverter | None = None) -> Any:
    """在类型中为每个可转换的枚举位置挂上 `EnumMemberConverter`.

    递归处理常见容器 (`list`, `tuple`, `set`, `frozenset`, `dict`,
    `Sequence`, `Mapping`) 与 `Union`. 其他泛型保持原样.

    Examples:
        >>> annotate(list[Status | None])
        list[Annotated[Status | None, EnumMemberConverter(...)]]
    """
    if converter is None:
        converter = EnumMemberConverter()
    if converter.selector.can_convert(tp):
        return Annotated[tp, converter]

    origin = get_origin(tp)
    if origin is None:
        return tp
    args = get_args(tp)

    if origin is Annotated:
        return Annotated[(annotate(args[0], converter), *args[1:])]
    if origin is Union or origin is types.UnionType:
        return Union[tuple(annotate(arg, converter) for arg in args)]
    if origin in _CONTAINERS:
        return origin[tuple(annotate(arg, converter) for arg in args)]
    return tp
