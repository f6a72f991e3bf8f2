"""配置对象测试."""

import dataclasses
from enum import IntEnum
from http import HTTPStatus

import pytest

from enum_member import DEFAULT_CONFIG, DEFAULT_NUMERIC_TYPES, Config, Option


class Code(IntEnum):
    """测试用枚举."""

    A = 1


def test_default_config() -> None:
    """默认配置: 无选项, HTTPStatus 始终写出数字."""
    assert DEFAULT_CONFIG.flags == Option.NONE
    assert DEFAULT_CONFIG.numeric_types == DEFAULT_NUMERIC_TYPES
    assert DEFAULT_CONFIG.is_numeric_type(HTTPStatus)
    assert not DEFAULT_CONFIG.is_numeric_type(Code)
    assert DEFAULT_CONFIG.numeric_alias_match is False
    assert DEFAULT_CONFIG.option == 0


def test_from_params_extra_numeric_types() -> None:
    """extra_numeric_types 追加到默认集合."""
    config = Config.from_params(extra_numeric_types=[Code])

    assert config.numeric_types == frozenset({HTTPStatus, Code})


def test_from_params_replace_numeric_types() -> None:
    """numeric_types 替换默认集合."""
    config = Config.from_params(numeric_types=[Code])

    assert config.numeric_types == frozenset({Code})
    assert not config.is_numeric_type(HTTPStatus)


def test_from_params_option() -> None:
    """选项标志被规范化为 Option."""
    config = Config.from_params(option=Option.NUMERIC_ALIAS_MATCH)

    assert isinstance(config.flags, Option)
    assert config.numeric_alias_match is True
    assert config.option == int(Option.NUMERIC_ALIAS_MATCH)


def test_config_is_frozen() -> None:
    """配置对象不可变."""
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.flags = Option.NUMERIC_ALIAS_MATCH  # type: ignore[misc]
