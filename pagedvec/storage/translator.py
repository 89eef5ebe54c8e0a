"""
偏移换算：逻辑偏移 -> (页号, 页内偏移)。

纯整数运算：page_index = offset >> P，intra_offset = offset & (2^P - 1)。
不做越界检查，偏移是否合法由调用方负责。
"""

from typing import Tuple


class IndexTranslator:
    """由页大小指数 P 派生出移位量与掩码"""
    __slots__ = ("shift", "mask", "elements_per_page")

    def __init__(self, page_bits: int):
        self.shift = page_bits
        self.elements_per_page = 1 << page_bits
        self.mask = self.elements_per_page - 1

    def translate(self, offset: int) -> Tuple[int, int]:
        return offset >> self.shift, offset & self.mask

    def page_of(self, offset: int) -> int:
        return offset >> self.shift

    def page_base(self, page_index: int) -> int:
        """页 page_index 第一个元素的逻辑偏移"""
        return page_index << self.shift

    def page_count_for(self, elements: int) -> int:
        """容纳 elements 个元素所需的页数（向上取整）"""
        return (elements + self.mask) >> self.shift

    def __repr__(self) -> str:
        return f"<IndexTranslator shift={self.shift} mask={self.mask:#x}>"
