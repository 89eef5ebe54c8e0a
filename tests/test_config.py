import pytest
from pagedvec.config import PagedVectorConfig, DEFAULT_PAGE_BITS, DEFAULT_MIN_PAGE_COUNT
from pagedvec.errors import ConfigError, ErrorType, PagedVectorError, InvalidOffsetError


def test_defaults():
    config = PagedVectorConfig()
    assert config.page_bits == DEFAULT_PAGE_BITS
    assert config.min_page_count == DEFAULT_MIN_PAGE_COUNT
    assert config.typecode is None
    assert config.bounds_check is False
    assert config.elements_per_page == 1 << DEFAULT_PAGE_BITS
    assert config.page_mask == (1 << DEFAULT_PAGE_BITS) - 1
    assert config.validate() is config


@pytest.mark.parametrize("kwargs", [
    {'page_bits': 0},
    {'page_bits': 31},
    {'page_bits': 2.5},
    {'min_page_count': 0},
    {'typecode': 'Z'},
])
def test_invalid_values(kwargs):
    with pytest.raises(ConfigError) as exc_info:
        PagedVectorConfig(**kwargs).validate()
    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.error_type == ErrorType.CONFIG_ERROR


def test_with_overrides_and_compatibility():
    base = PagedVectorConfig(page_bits=6)
    other = base.with_overrides(min_page_count=8, bounds_check=True)
    assert other.page_bits == 6 and other.min_page_count == 8
    assert base.min_page_count == DEFAULT_MIN_PAGE_COUNT
    assert base.is_compatible(other)
    assert not base.is_compatible(base.with_overrides(typecode='B'))
    assert not base.is_compatible(base.with_overrides(page_bits=7))


def test_config_is_frozen():
    config = PagedVectorConfig()
    with pytest.raises(Exception):
        config.page_bits = 3


def test_error_str_includes_details():
    err = InvalidOffsetError("Offset 9 out of range", {"size": 4})
    assert isinstance(err, PagedVectorError)
    assert isinstance(err, IndexError)
    assert str(err) == "[INVALID_OFFSET] Offset 9 out of range (size=4)"
    assert str(PagedVectorError("boom")) == "[UNKNOWN_ERROR] boom"
