"""枚举读写的配置选项.

该模块定义了用于控制 `EnumCodec.read` 行为的选项标志.
"""

from enum import IntFlag


class Option(IntFlag):
    """枚举编解码选项标志.

    可以使用位运算组合多个选项.
    """

    # 默认行为:
    # 1. 字符串 Token 先匹配别名, 再回退到成员名/整数字面量
    # 2. 数字 Token 直接按整数编码查找
    NONE = 0x00

    # 兼容模式:
    # 数字 Token 先转为十进制字符串与别名比较, 命中则返回该成员.
    # 仅当某个别名恰好写成整数 (如 "2") 时, 结果才与默认行为不同.
    NUMERIC_ALIAS_MATCH = 0x01
