"""
pagedvec：基于固定大小页面的可增长随机访问序列。

模块清单：
- config: 容器配置（页大小指数、最小扩容页数、元素表示）
- errors: 异常体系
- storage.page: 固定容量的页面缓冲
- storage.translator: 逻辑偏移到 (页号, 页内偏移) 的换算
- storage.page_table: 页表与扩容策略
- container.paged_vector: 分页向量本体
"""

from .config import PagedVectorConfig
from .errors import (
    PagedVectorError,
    InvalidOffsetError,
    PageAllocationError,
    CapacityExceededError,
    ConfigError,
    ConfigMismatchError,
)
from .container.paged_vector import PagedVector

__all__ = [
    "PagedVector",
    "PagedVectorConfig",
    "PagedVectorError",
    "InvalidOffsetError",
    "PageAllocationError",
    "CapacityExceededError",
    "ConfigError",
    "ConfigMismatchError",
]
