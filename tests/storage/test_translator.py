import pytest
from pagedvec.storage.translator import IndexTranslator


def test_shift_and_mask():
    tr = IndexTranslator(4)
    assert tr.shift == 4
    assert tr.mask == 0xF
    assert tr.elements_per_page == 16


@pytest.mark.parametrize("offset, expected", [
    (0, (0, 0)),
    (15, (0, 15)),
    (16, (1, 0)),
    (17, (1, 1)),
    (16 * 5 + 3, (5, 3)),
])
def test_translate(offset, expected):
    tr = IndexTranslator(4)
    assert tr.translate(offset) == expected
    assert tr.page_of(offset) == expected[0]


def test_page_base():
    tr = IndexTranslator(3)
    assert tr.page_base(0) == 0
    assert tr.page_base(2) == 16


def test_page_count_for():
    tr = IndexTranslator(2)
    assert tr.page_count_for(0) == 0
    assert tr.page_count_for(1) == 1
    assert tr.page_count_for(4) == 1
    assert tr.page_count_for(5) == 2
    assert tr.page_count_for(9) == 3
