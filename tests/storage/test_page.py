import pytest
from pagedvec.storage.page import Page


def test_list_page_init():
    page = Page(page_id=1, page_size=8)
    assert page.page_id == 1
    assert page.page_size == 8
    assert len(page) == 8
    assert page.data == [None] * 8


def test_list_page_fill_value():
    page = Page(page_id=0, page_size=4, fill=-1)
    assert list(page.data) == [-1, -1, -1, -1]


def test_typed_page_zero_filled():
    page = Page(page_id=0, page_size=16, typecode='B')
    assert page.data.typecode == 'B'
    assert len(page.data) == 16
    assert page.to_bytes() == b'\x00' * 16


def test_page_item_access():
    page = Page(page_id=0, page_size=4, typecode='i')
    page[2] = 42
    assert page[2] == 42
    assert page.data[2] == 42


def test_copy_from_whole_page():
    src = Page(page_id=0, page_size=4, typecode='B')
    for i in range(4):
        src[i] = i + 1
    dst = Page(page_id=1, page_size=4, typecode='B')
    dst.copy_from(src, 4)
    assert list(dst.data) == [1, 2, 3, 4]
    # 块拷贝后两页互不影响
    src[0] = 99
    assert dst[0] == 1


def test_copy_from_partial_block():
    src = Page(page_id=0, page_size=4)
    src.data[:] = ['a', 'b', 'c', 'd']
    dst = Page(page_id=1, page_size=4, fill='x')
    dst.copy_from(src, 2)
    assert dst.data == ['a', 'b', 'x', 'x']
    assert len(dst.data) == 4


def test_copy_from_too_large():
    src = Page(page_id=0, page_size=4)
    dst = Page(page_id=1, page_size=4)
    with pytest.raises(ValueError):
        dst.copy_from(src, 5)


def test_list_page_has_no_bytes():
    page = Page(page_id=0, page_size=4)
    with pytest.raises(TypeError):
        page.to_bytes()


def test_page_repr():
    s = repr(Page(page_id=3, page_size=4, typecode='d'))
    assert 'id=3' in s and 'type=d' in s
