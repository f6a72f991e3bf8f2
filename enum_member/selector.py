"""编解码器选择.

根据运行时类型判断:
    - 整数枚举 `E` -> `EnumCodec`
    - `E | None` / `Optional[E]` -> 包装了 `EnumCodec` 的 `OptionalValueAdapter`
    - 其他类型 -> 不适用 (返回 None, 交由宿主引擎的其他转换器处理)
"""

import threading
import types
from enum import Enum
from typing import Any, Union, get_args, get_origin

from .codec import Codec, EnumCodec
from .config import DEFAULT_CONFIG, Config
from .exceptions import EnumMemberTypeError
from .index import EnumMetadataIndex
from .member import is_int_enum
from .optional import OptionalValueAdapter

_NoneType = type(None)


def unwrap_optional(tp: Any) -> tuple[bool, Any]:
    """拆开 `X | None` 形式的类型.

    Returns:
        tuple[bool, Any]: (是否为可空包装, 内部类型). 非可空包装时返回 (False, tp).
    """
    origin = get_origin(tp)
    if origin is Union or origin is types.UnionType:
        args = get_args(tp)
        inner = [arg for arg in args if arg is not _NoneType]
        if len(inner) == 1 and len(inner) < len(args):
            return True, inner[0]
    return False, tp


class CodecSelector:
    """按类型创建并缓存编解码器.

    同一枚举类型的 `EnumCodec` 在选择器内只构建一次;
    `E` 与 `E | None` 共用同一个 `EnumCodec`.
    """

    def __init__(self, config: Config | None = None) -> None:
        self._config = config if config is not None else DEFAULT_CONFIG
        self._codecs: dict[type[Enum], EnumCodec[Any]] = {}
        self._lock = threading.Lock()

    @property
    def config(self) -> Config:
        """选择器使用的配置."""
        return self._config

    def can_convert(self, tp: Any) -> bool:
        """判断类型是否为整数枚举或其可空包装."""
        if is_int_enum(tp):
            return True
        is_optional, inner = unwrap_optional(tp)
        return is_optional and is_int_enum(inner)

    def select(self, tp: Any) -> Codec[Any] | None:
        """返回适用于该类型的编解码器, 不适用时返回 None.

        构建编解码器时抛出的异常原样向上传播.
        """
        if is_int_enum(tp):
            return self._get_codec(tp)
        is_optional, inner = unwrap_optional(tp)
        if is_optional and is_int_enum(inner):
            return OptionalValueAdapter(self._get_codec(inner))
        return None

    def create_codec(self, tp: Any) -> Codec[Any]:
        """返回适用于该类型的编解码器.

        Raises:
            EnumMemberTypeError: 类型不是整数枚举或其可空包装.
        """
        codec = self.select(tp)
        if codec is None:
            raise EnumMemberTypeError(f"No enum codec applies to {tp!r}")
        return codec

    def clear(self) -> None:
        """清空已缓存的编解码器."""
        with self._lock:
            self._codecs.clear()

    def _get_codec(self, enum_type: type[Enum]) -> EnumCodec[Any]:
        # 别名注册会失效索引, 绑定旧索引的编解码器需要重建
        index = EnumMetadataIndex.for_type(enum_type)
        codec = self._codecs.get(enum_type)
        if codec is not None and codec.index is index:
            return codec
        with self._lock:
            codec = self._codecs.get(enum_type)
            if codec is None or codec.index is not index:
                codec = EnumCodec(
                    enum_type,
                    serialize_as_numeric=self._config.is_numeric_type(enum_type),
                    option=self._config.flags,
                    index=index,
                )
                self._codecs[enum_type] = codec
        return codec


default_selector = CodecSelector()
