"""提供 enum_member 测试的公共 Fixtures 和配置."""

from collections.abc import Generator

import pytest

from enum_member import EnumMetadataIndex, default_selector


@pytest.fixture(autouse=True)
def _reset_caches() -> Generator[None, None, None]:
    """每个测试前后清空索引缓存与默认选择器缓存."""
    EnumMetadataIndex.invalidate()
    default_selector.clear()
    yield
    EnumMetadataIndex.invalidate()
    default_selector.clear()
