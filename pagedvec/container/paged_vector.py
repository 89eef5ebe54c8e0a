"""
分页向量（PagedVector）。

由固定大小页面组成的可增长随机访问序列。增长时只替换很小的页句柄数组，
从不重新分配或复制已有元素，因此也不会使已取得的页面引用失效。

职责：
- 追加 / 弹出 / 单点删除 / 清空 / 预留
- 按逻辑偏移以及按“分区 + 偏移”随机访问
- 以整页块拷贝实现的深拷贝赋值

约定：
- 默认配置下不做越界检查，越界偏移的行为未定义；
  bounds_check=True 时抛出 InvalidOffsetError
- clear() 只重置游标，保留全部页面（高水位保留）；release() 才释放内存
- 非线程安全。at_partition 只是供调用方自行按页划分访问的提示，容器不做任何强制或同步
"""

from typing import Any, Optional
from loguru import logger

from ..config import PagedVectorConfig, MAX_ELEMENTS
from ..errors import InvalidOffsetError, CapacityExceededError, ConfigMismatchError
from ..storage.page import Page
from ..storage.page_table import PageTable


class PagedVector:
    """
    分页向量。

    :param config: 容器配置，缺省使用 PagedVectorConfig()
    :param overrides: 覆盖配置中的字段，例如 PagedVector(page_bits=4, typecode='B')
    """

    def __init__(self, config: Optional[PagedVectorConfig] = None, **overrides: Any) -> None:
        config = config or PagedVectorConfig()
        if overrides:
            config = config.with_overrides(**overrides)
        self.config = config.validate()
        self._table = PageTable(self.config)
        self._shift = self._table.translator.shift
        self._mask = self._table.translator.mask
        self._count = 0
        logger.debug(f"PagedVector created: page_bits={config.page_bits}, "
                     f"min_page_count={config.min_page_count}, typecode={config.typecode}")

    # --- 容量与大小 ---

    def size(self) -> int:
        return self._count

    def empty(self) -> bool:
        return self._count == 0

    def pages(self) -> int:
        """当前存有有效元素的逻辑页数"""
        return self._table.translator.page_count_for(self._count)

    def capacity(self) -> int:
        """不触发扩容即可容纳的元素数"""
        return self._table.element_capacity

    @property
    def page_table(self) -> PageTable:
        return self._table

    def reserve(self, elements: int) -> None:
        """预留空间，随后追加到 elements 个元素都不会触发扩容。只增不减。"""
        self._table.reserve(elements)

    # --- 随机访问 ---

    def _check_offset(self, offset: int) -> None:
        if not 0 <= offset < self._count:
            raise InvalidOffsetError(f"Offset {offset} out of range", {"size": self._count})

    def at(self, offset: int) -> Any:
        if self.config.bounds_check:
            self._check_offset(offset)
        return self._table.pages[offset >> self._shift].data[offset & self._mask]

    def set_at(self, offset: int, value: Any) -> None:
        if self.config.bounds_check:
            self._check_offset(offset)
        self._table.pages[offset >> self._shift].data[offset & self._mask] = value

    def _partition_page(self, page_partition: int, offset: int) -> int:
        page_index = offset >> self._shift
        return page_index & (page_partition - 1) if page_partition != 0 else 0

    def at_partition(self, page_partition: int, offset: int) -> Any:
        """
        按分区访问：换算出的页号与 (page_partition - 1) 按位与（page_partition 为 0 时取第 0 页）。
        仅供调用方在多个工作者间按页划分访问时使用；容器不做任何强制、屏障或可见性保证。
        """
        page_index = self._partition_page(page_partition, offset)
        return self._table.pages[page_index].data[offset & self._mask]

    def set_at_partition(self, page_partition: int, offset: int, value: Any) -> None:
        page_index = self._partition_page(page_partition, offset)
        self._table.pages[page_index].data[offset & self._mask] = value

    def back(self) -> Any:
        """最后一个元素；容器为空时返回偏移 0 处的槽位（bounds_check 时抛异常）"""
        if self._count == 0:
            if self.config.bounds_check:
                raise InvalidOffsetError("back() on empty container")
            return self._table.pages[0].data[0]
        return self.at(self._count - 1)

    def get_page_block(self, page_index: int = 0) -> Page:
        """
        直接返回页面引用，供外部批量拷贝使用。
        page_index >= pages() 时静默返回第 0 页（bounds_check 时抛异常）。
        """
        if page_index >= self.pages() or page_index < 0:
            if self.config.bounds_check:
                raise InvalidOffsetError(f"Page {page_index} holds no elements", {"pages": self.pages()})
            return self._table.pages[0]
        return self._table.pages[page_index]

    def __len__(self) -> int:
        return self._count

    def __getitem__(self, offset: int) -> Any:
        return self.at(offset)

    def __setitem__(self, offset: int, value: Any) -> None:
        self.set_at(offset, value)

    # no iterator protocol; index explicitly
    __iter__ = None

    # --- 修改操作 ---

    def push_back(self, value: Any) -> None:
        count = self._count
        if count >= MAX_ELEMENTS:
            raise CapacityExceededError("Element count would exceed 32-bit range", {"size": count})
        table = self._table
        if count >> self._shift != table.active_page_index:
            table.advance()
        table.active_page.data[count & self._mask] = value
        self._count = count + 1

    def pop_back(self) -> None:
        """删除最后一个元素；槽位内容不清除，下次写入时覆盖"""
        if self._count == 0:
            return
        self._count -= 1
        self._table.seek(self._count >> self._shift)

    def erase(self, offset: int) -> None:
        """
        删除 offset 处元素，其后元素整体前移一位（O(n)，跨页由换算透明处理）。
        容器为空或 offset >= size() 时不做任何事（bounds_check 时抛异常）。
        """
        count = self._count
        if count == 0 or not 0 <= offset < count:
            if self.config.bounds_check:
                raise InvalidOffsetError(f"Cannot erase offset {offset}", {"size": count})
            logger.trace(f"erase({offset}) ignored, size={count}")
            return
        if offset == count - 1:
            self.pop_back()
            return

        pages = self._table.pages
        per_page = self._table.elements_per_page
        last = count - 1
        i = offset
        translator = self._table.translator
        while i < last:
            page_index, intra = translator.translate(i)
            base = translator.page_base(page_index)
            data = pages[page_index].data
            stop = last - base
            if stop < per_page:
                # tail lies in this page
                data[intra:stop] = data[intra + 1:stop + 1]
                break
            data[intra:per_page - 1] = data[intra + 1:per_page]
            data[per_page - 1] = pages[page_index + 1].data[0]
            i = base + per_page

        self._count = last
        page_index = translator.page_of(last)
        if page_index != self._table.active_page_index:
            self._table.seek(page_index)

    def clear(self) -> None:
        """逻辑清空：大小归零、活动页回到第 0 页，页面内存全部保留"""
        self._count = 0
        self._table.seek(0)

    def release(self) -> None:
        """清空并释放页面内存，只保留构造时预分配的页；分配失败时容器保持原样"""
        self._table.release()
        self._count = 0

    # --- 深拷贝赋值 ---

    def assign_from(self, other: 'PagedVector') -> 'PagedVector':
        """
        把 other 的逻辑内容深拷贝到本容器（整页块拷贝 + 末尾部分页拷贝）。
        other 只读；自赋值为空操作。
        """
        if other is self:
            return self
        if not self.config.is_compatible(other.config):
            raise ConfigMismatchError(
                "Cannot assign between containers with different page layouts",
                {"page_bits": (self.config.page_bits, other.config.page_bits),
                 "typecode": (self.config.typecode, other.config.typecode)},
            )
        count = other._count
        self.clear()
        self.reserve(count)

        source_pages = other._table.pages
        table = self._table
        per_page = table.elements_per_page
        full_blocks = count >> self._shift
        for block in range(full_blocks):
            table.pages[block].copy_from(source_pages[block], per_page)
            table.active_page_index += 1

        remainder = count & self._mask
        if remainder:
            table.pages[full_blocks].copy_from(source_pages[full_blocks], remainder)

        table.seek(full_blocks)
        self._count = count
        return self

    def copy(self) -> 'PagedVector':
        """返回同配置的新容器，内容为本容器的深拷贝"""
        return PagedVector(self.config).assign_from(self)

    __copy__ = copy

    def __deepcopy__(self, memo) -> 'PagedVector':
        return self.copy()

    def __repr__(self) -> str:
        return (f"<PagedVector size={self._count} pages={self.pages()} "
                f"capacity={self.capacity()} page_size={self.config.elements_per_page}>")
