"""enum_member 日志记录器."""

import logging
from typing import Any

logger = logging.getLogger("enum_member")


def short_repr(value: Any) -> str:
    """返回值的 repr; 超出 int -> str 位数上限的整数以位数表示."""
    try:
        return repr(value)
    except ValueError:
        return f"<int of {value.bit_length()} bits>"


def format_token(token: Any) -> str:
    """格式化 Token 以便写入日志, 附带其类型名."""
    return f"{short_repr(token)} ({type(token).__name__})"
