"""
页面抽象：固定容量的元素缓冲。

- 创建时一次性分配并初始化全部槽位
- 从不收缩，只随页表一起释放
- 支持整页/部分页的块拷贝（切片赋值）
"""

import array
from typing import Any, Optional, Union

PageData = Union[list, array.array]


class Page:
    """
    固定容量页面，容纳 page_size 个元素。
    typecode 为 None 时底层是 list，否则是 array.array。
    """
    __slots__ = ("page_id", "page_size", "typecode", "data")

    def __init__(self, page_id: int, page_size: int, typecode: Optional[str] = None, fill: Any = None):
        self.page_id = page_id
        self.page_size = page_size
        self.typecode = typecode
        if typecode is None:
            self.data: PageData = [fill] * page_size
        else:
            self.data = array.array(typecode, [0]) * page_size

    def copy_from(self, source: 'Page', count: int) -> None:
        """
        把 source 的前 count 个元素块拷贝到本页开头。
        count 不能超过页容量，两页的 typecode 必须一致。
        """
        if count > self.page_size:
            raise ValueError(f"Block of {count} elements does not fit a page of {self.page_size}")
        if count == self.page_size:
            self.data[:] = source.data
        else:
            self.data[:count] = source.data[:count]

    def to_bytes(self) -> bytes:
        """类型化页面的原始字节（供序列化等外部批量消费者使用）"""
        if self.typecode is None:
            raise TypeError("List-backed pages have no byte representation")
        return self.data.tobytes()

    def __len__(self) -> int:
        return self.page_size

    def __getitem__(self, index):
        return self.data[index]

    def __setitem__(self, index, value) -> None:
        self.data[index] = value

    def __repr__(self) -> str:
        kind = self.typecode if self.typecode is not None else "object"
        return f"<Page id={self.page_id} size={self.page_size} type={kind}>"
