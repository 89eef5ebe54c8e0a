"""
页表（PageTable）模块。

职责：
- 持有全部页面（页句柄数组），页面一经分配便保留到页表释放
- 维护活动页游标（当前接收追加写入的页）
- 扩容：整体替换页句柄数组，旧句柄按引用复制，新槽位分配新页，
  已有页面内容与引用保持不变
"""

from typing import List
from loguru import logger

from ..config import PagedVectorConfig
from ..errors import PageAllocationError
from .page import Page
from .translator import IndexTranslator


class PageTable:
    """
    页表，负责页面分配、活动页游标与扩容。
    构造时预分配 min_page_count 页，页数永不为 0。
    """

    def __init__(self, config: PagedVectorConfig) -> None:
        self.config = config
        self.translator = IndexTranslator(config.page_bits)
        self.elements_per_page = config.elements_per_page
        self.min_page_count = config.min_page_count
        self.pages_allocated = 0    # 历史上分配过的页数
        self.grow_events = 0        # 页句柄数组被替换的次数
        self.pages: List[Page] = self._allocate_pages(0, self.min_page_count)
        self.active_page_index = 0
        self.active_page = self.pages[0]

    @property
    def page_capacity(self) -> int:
        """已分配的页槽数（不同于正在使用的逻辑页数）"""
        return len(self.pages)

    @property
    def element_capacity(self) -> int:
        return len(self.pages) * self.elements_per_page

    def _allocate_pages(self, first_id: int, end_id: int) -> List[Page]:
        """分配页号区间 [first_id, end_id) 的新页"""
        config = self.config
        try:
            pages = [Page(page_id, self.elements_per_page, config.typecode, config.fill)
                     for page_id in range(first_id, end_id)]
        except MemoryError as e:
            logger.error(f"Failed to allocate pages [{first_id}, {end_id}) of {self.elements_per_page} elements")
            raise PageAllocationError(
                "Out of memory while allocating pages",
                {"first_page": first_id, "last_page": end_id - 1, "page_size": self.elements_per_page},
            ) from e
        self.pages_allocated += len(pages)
        return pages

    def ensure_capacity_for(self, page_index: int) -> None:
        """
        保证页 page_index 已分配。
        不足时新页表大小为 page_index + min_page_count，旧句柄按引用复制。
        """
        old_capacity = len(self.pages)
        if page_index < old_capacity:
            return
        new_capacity = page_index + self.min_page_count
        table = list(self.pages)  # handle copy, pages untouched
        table.extend(self._allocate_pages(old_capacity, new_capacity))
        self.pages = table
        self.grow_events += 1
        logger.debug(f"Page table grown {old_capacity} -> {new_capacity} pages")

    def advance(self) -> None:
        """活动页前移一页，必要时先扩容"""
        self.ensure_capacity_for(self.active_page_index + 1)
        self.active_page_index += 1
        self.active_page = self.pages[self.active_page_index]

    def seek(self, page_index: int) -> None:
        """把活动页游标指向已分配的页 page_index"""
        self.active_page_index = page_index
        self.active_page = self.pages[page_index]

    def reserve(self, elements: int) -> None:
        """
        预先扩容，使随后追加到 elements 个元素的过程中不再触发扩容。
        只增不减，活动页游标保持不变。
        """
        required_index = self.translator.page_of(elements)
        if required_index < len(self.pages):
            return
        self.ensure_capacity_for(required_index)

    def release(self) -> None:
        """
        释放全部页面，恢复到刚构造时的状态（min_page_count 页）。
        新页分配成功后才替换旧页表，分配失败时页表与游标不变。
        仅由容器的显式释放操作调用，clear 不会走到这里。
        """
        released = len(self.pages)
        fresh = self._allocate_pages(0, self.min_page_count)
        self.pages = fresh
        self.active_page_index = 0
        self.active_page = fresh[0]
        logger.debug(f"Released {released} pages, kept {self.min_page_count}")

    def __repr__(self) -> str:
        return (f"<PageTable capacity={self.page_capacity} active={self.active_page_index} "
                f"page_size={self.elements_per_page} grows={self.grow_events}>")
