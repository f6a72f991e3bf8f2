"""枚举类型适配器.

提供类似于 Pydantic TypeAdapter 的接口,
用于以别名规则处理枚举及包含枚举的容器类型的 JSON 序列化/反序列化.
"""

from typing import Any, Generic, Literal, TypeVar

from pydantic import TypeAdapter

from .codec import Codec
from .config import Config
from .converter import EnumMemberConverter, annotate
from .exceptions import EnumMemberTypeError
from .selector import CodecSelector, default_selector

T = TypeVar("T")


class EnumTypeAdapter(Generic[T]):
    """枚举类型适配器.

    类似于 `pydantic.TypeAdapter`, 但类型中的每个整数枚举位置都使用
    `EnumCodec` 按别名读写.

    支持的类型:
        - 整数枚举 `E` 与可空枚举 `E | None`
        - 包含上述类型的容器 (`list[E]`, `dict[str, E | None]` 等)
        - 其他类型按 pydantic 默认规则处理

    Examples:
        >>> adapter = EnumTypeAdapter(list[Status])
        >>> adapter.dump_json([Status.ACTIVE, Status.UNKNOWN])
        b'["active",99]'
        >>> adapter.validate_json('["inactive", 99]')
        [<Status.INACTIVE: 2>, <Status.UNKNOWN: 99>]
    """

    def __init__(self, type_: type[T] | Any, *, config: Config | None = None):
        """初始化枚举类型适配器.

        Args:
            type_: 目标类型.
            config: 编解码配置. 为 None 时使用默认选择器.
        """
        self._type = type_
        self._selector = default_selector if config is None else CodecSelector(config)
        self._codec = self._selector.select(type_)
        converter = EnumMemberConverter(selector=self._selector)
        self._pydantic_adapter: TypeAdapter[T] = TypeAdapter(annotate(type_, converter))

    @property
    def codec(self) -> Codec[Any] | None:
        """顶层类型的编解码器; 顶层不是 (可空) 枚举时为 None."""
        return self._codec

    def validate_python(self, obj: Any) -> T:
        """验证 Python 对象 (成员, 别名, 成员名或整数编码)."""
        return self._pydantic_adapter.validate_python(obj)

    def validate_json(self, data: str | bytes | bytearray) -> T:
        """验证并反序列化 JSON 数据.

        Raises:
            pydantic.ValidationError: 数据中存在无法解析的枚举 Token.
        """
        return self._pydantic_adapter.validate_json(data)

    def dump_python(self, obj: T, *, mode: Literal["python", "json"] = "python") -> Any:
        """转换为 Python 对象. `mode="json"` 时枚举被替换为别名或整数编码."""
        return self._pydantic_adapter.dump_python(obj, mode=mode)

    def dump_json(self, obj: T) -> bytes:
        """序列化为 JSON 数据."""
        return self._pydantic_adapter.dump_json(obj)

    def json_schema(self) -> dict[str, Any]:
        """生成 JSON Schema, 枚举位置列出全部写出值."""
        return self._pydantic_adapter.json_schema()

    def read(self, token: Any) -> T:
        """直接用顶层编解码器解析单个 Token."""
        return self._require_codec().read(token)

    def write(self, obj: T) -> Any:
        """直接用顶层编解码器写出单个值."""
        return self._require_codec().write(obj)

    def _require_codec(self) -> Codec[Any]:
        if self._codec is None:
            raise EnumMemberTypeError(f"No enum codec applies to {self._type!r}")
        return self._codec
