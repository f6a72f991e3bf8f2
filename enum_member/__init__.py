"""枚举别名编解码库.

按成员别名读写整数枚举的 JSON 表示, 无别名时回退到成员名或整数编码.
提供 pydantic 集成 (`EnumMemberConverter`, `EnumTypeAdapter`).
"""

from .adapter import EnumTypeAdapter
from .codec import Codec, EnumCodec, Token
from .config import DEFAULT_CONFIG, DEFAULT_NUMERIC_TYPES, Config
from .converter import EnumMemberConverter, annotate
from .exceptions import (
    EnumMemberError,
    EnumMemberTypeError,
    UnsupportedValueError,
)
from .index import EnumConstantRecord, EnumMetadataIndex
from .member import (
    enum_member,
    get_alias,
    is_int_enum,
    iter_constants,
    register_aliases,
    unregister_aliases,
)
from .optional import OptionalValueAdapter
from .options import Option
from .selector import CodecSelector, default_selector, unwrap_optional

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_NUMERIC_TYPES",
    "Codec",
    "CodecSelector",
    "Config",
    "EnumCodec",
    "EnumConstantRecord",
    "EnumMemberConverter",
    "EnumMemberError",
    "EnumMemberTypeError",
    "EnumMetadataIndex",
    "EnumTypeAdapter",
    "Option",
    "OptionalValueAdapter",
    "Token",
    "UnsupportedValueError",
    "__version__",
    "annotate",
    "default_selector",
    "enum_member",
    "get_alias",
    "is_int_enum",
    "iter_constants",
    "register_aliases",
    "unregister_aliases",
    "unwrap_optional",
]
