"""enum-member CLI - 枚举别名编解码命令行工具."""

from __future__ import annotations

import importlib
import json
import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    import click as click_module
    from rich.console import Console as ConsoleType
    from rich.table import Table as TableType
else:
    try:
        import click as click_module
        from rich.console import Console as ConsoleType
        from rich.table import Table as TableType
    except ImportError:
        click_module = None
        ConsoleType = None
        TableType = None

from enum_member.codec import EnumCodec
from enum_member.config import Config
from enum_member.exceptions import EnumMemberError, EnumMemberTypeError
from enum_member.log import logger
from enum_member.member import is_int_enum
from enum_member.options import Option
from enum_member.selector import CodecSelector

click = click_module


def _check_cli_deps() -> None:
    """检查 CLI 依赖是否安装."""
    if not click:
        print(
            "错误: CLI 依赖未安装\n请运行: pip install enum-member[cli]",
            file=sys.stderr,
        )
        sys.exit(1)


def load_enum_type(target: str) -> type[Enum]:
    """按 `module:QualName` 加载整数枚举类型.

    Args:
        target: 如 `http:HTTPStatus` 或 `pkg.models:Outer.Status`.

    Returns:
        枚举类型.

    Raises:
        ValueError: 目标格式错误或属性不存在.
        ImportError: 模块无法导入.
        EnumMemberTypeError: 目标不是整数枚举.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise ValueError(f"目标格式应为 module:QualName, 实际为 {target!r}")

    obj: Any = importlib.import_module(module_name)
    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as e:
            raise ValueError(f"{module_name} 中不存在 {qualname}") from e

    if not is_int_enum(obj):
        raise EnumMemberTypeError(f"{target} 不是整数枚举")
    return obj


def build_codec(
    enum_type: type[Enum], numeric: bool = False, option: Option = Option.NONE
) -> EnumCodec[Any]:
    """按命令行参数创建编解码器."""
    config = Config.from_params(
        option=option, extra_numeric_types=(enum_type,) if numeric else ()
    )
    codec = CodecSelector(config).create_codec(enum_type)
    assert isinstance(codec, EnumCodec)
    return codec


def build_table(codec: EnumCodec[Any]) -> TableType:
    """构建成员一览表 (成员名 / 编码 / 别名 / 写出值)."""
    from rich.table import Table

    table = Table(title=codec.enum_type.__name__)
    table.add_column("Name", style="bold blue")
    table.add_column("Code", style="cyan", justify="right")
    table.add_column("Alias", style="yellow")
    table.add_column("Wire", style="green")

    for record in codec.index:
        table.add_row(
            record.value.name,
            str(record.numeric_code),
            record.alias_text if record.alias_text is not None else "-",
            json.dumps(codec.write(record.value), ensure_ascii=False),
        )
    return table


def _enable_debug_logging(console: ConsoleType) -> None:
    from rich.logging import RichHandler

    handler = RichHandler(console=console, show_path=False)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)


def _create_cli() -> Any:
    """创建 CLI 命令."""
    _check_cli_deps()

    from rich.console import Console

    console = Console()
    error_console = Console(stderr=True)

    def resolve(target: str, numeric: bool, option: Option) -> EnumCodec[Any]:
        try:
            return build_codec(load_enum_type(target), numeric, option)
        except (ImportError, ValueError, EnumMemberTypeError) as e:
            error_console.print(f"[red]Error:[/] 加载枚举失败: {e}")
            raise SystemExit(1) from e

    @click.group()
    @click.option(
        "-v",
        "--verbose",
        is_flag=True,
        help="显示详细的解析过程信息",
    )
    def cli(verbose: bool) -> None:
        """枚举别名编解码命令行工具.

        Examples:
            enum-member show http:HTTPStatus
            enum-member read pkg.models:Status active
        """
        if verbose:
            _enable_debug_logging(error_console)

    @cli.command()
    @click.argument("target")
    @click.option(
        "--numeric",
        is_flag=True,
        help="始终写出整数编码",
    )
    def show(target: str, numeric: bool) -> None:
        """列出枚举 TARGET 的全部成员."""
        codec = resolve(target, numeric, Option.NONE)
        console.print(build_table(codec))

    @cli.command()
    @click.argument("target")
    @click.argument("token")
    @click.option(
        "--number",
        is_flag=True,
        help="将 TOKEN 视为 JSON 数字而非字符串",
    )
    @click.option(
        "--numeric-alias-match",
        is_flag=True,
        help="数字 Token 先与别名文本比较",
    )
    def read(target: str, token: str, number: bool, numeric_alias_match: bool) -> None:
        """将 TOKEN 解析为枚举 TARGET 的成员."""
        option = Option.NUMERIC_ALIAS_MATCH if numeric_alias_match else Option.NONE
        codec = resolve(target, False, option)

        value: str | int = token
        if number:
            try:
                value = int(token)
            except ValueError as e:
                error_console.print(f"[red]Error:[/] 不是整数: {token!r}")
                raise SystemExit(1) from e

        try:
            member = codec.read(value)
        except EnumMemberError as e:
            error_console.print(f"[red]Error:[/] 解析失败: {e}")
            raise SystemExit(1) from e
        console.print(
            f"{codec.enum_type.__name__}.{member.name} = {member.value}",
            highlight=False,
        )

    @cli.command()
    @click.argument("target")
    @click.argument("name")
    @click.option(
        "--numeric",
        is_flag=True,
        help="始终写出整数编码",
    )
    def write(target: str, name: str, numeric: bool) -> None:
        """输出枚举 TARGET 中成员 NAME 的 JSON 写出值."""
        codec = resolve(target, numeric, Option.NONE)
        member = codec.enum_type.__members__.get(name)
        if member is None:
            error_console.print(
                f"[red]Error:[/] {codec.enum_type.__name__} 中不存在成员 {name!r}"
            )
            raise SystemExit(1)
        console.print(
            json.dumps(codec.write(member), ensure_ascii=False), highlight=False
        )

    return cli


def main() -> None:
    """入口函数."""
    cli = _create_cli()
    cli()


if __name__ == "__main__":
    main()
