# -*- coding: utf-8 -*-
"""
分页向量配置

对应“编译期配置”：页大小指数、扩容时最少新增的页数、元素表示方式。
"""
import array
from dataclasses import dataclass, replace
from typing import Any, Optional

from .errors import ConfigError

# --- 默认值 ---
DEFAULT_PAGE_BITS = 14          # 每页 2^14 个元素
DEFAULT_MIN_PAGE_COUNT = 1      # 每次扩容至少新增 1 页
MIN_PAGE_BITS = 1
MAX_PAGE_BITS = 30
MAX_ELEMENTS = 0xFFFFFFFF       # 元素计数为 32 位无符号整数


@dataclass(frozen=True)
class PagedVectorConfig:
    """
    分页向量配置。

    :param page_bits: 页大小指数 P，每页容纳 2^P 个元素
    :param min_page_count: 构造时预分配的页数，也是每次扩容时新增的最少页数
    :param typecode: None 表示页面为 list（可存放任意对象）；
                     否则为 array 模块的类型码（如 'B'、'i'、'd'），页面为定长机器类型数组
    :param fill: list 页面新槽位的初始值；类型化页面总是以 0 填充
    :param bounds_check: 调试模式，开启后越界偏移抛出 InvalidOffsetError
    """
    page_bits: int = DEFAULT_PAGE_BITS
    min_page_count: int = DEFAULT_MIN_PAGE_COUNT
    typecode: Optional[str] = None
    fill: Any = None
    bounds_check: bool = False

    @property
    def elements_per_page(self) -> int:
        return 1 << self.page_bits

    @property
    def page_mask(self) -> int:
        return (1 << self.page_bits) - 1

    def validate(self) -> 'PagedVectorConfig':
        """检查取值范围，非法时抛出 ConfigError；返回自身便于链式调用。"""
        if not isinstance(self.page_bits, int) or not MIN_PAGE_BITS <= self.page_bits <= MAX_PAGE_BITS:
            raise ConfigError(
                f"page_bits must be an integer in [{MIN_PAGE_BITS}, {MAX_PAGE_BITS}]",
                {"page_bits": self.page_bits},
            )
        if not isinstance(self.min_page_count, int) or self.min_page_count < 1:
            raise ConfigError("min_page_count must be a positive integer",
                              {"min_page_count": self.min_page_count})
        if self.typecode is not None and self.typecode not in array.typecodes:
            raise ConfigError(f"unknown array typecode {self.typecode!r}",
                              {"supported": array.typecodes})
        return self

    def with_overrides(self, **overrides: Any) -> 'PagedVectorConfig':
        """返回替换了部分字段的新配置"""
        return replace(self, **overrides)

    def is_compatible(self, other: 'PagedVectorConfig') -> bool:
        """页大小与元素表示一致即可整页块拷贝"""
        return self.page_bits == other.page_bits and self.typecode == other.typecode
