import pytest

from coreext.slices import ElementRef, SliceView

LISTS = [
    list(range(12)),
    [n * 1000 for n in range(12)],
    [""] * 12,
]


def _parts(values):
    whole = SliceView(values)
    return whole, whole[0:4], whole[4:8], whole[8:12]


@pytest.mark.parametrize("values", LISTS)
def test_contains_slice(values):
    _, slice_a, slice_b, slice_c = _parts(values)
    assert slice_b.contains_slice(slice_a[3:]) is False
    assert slice_b.contains_slice(slice_a[4:]) is False

    assert slice_b.contains_slice(slice_b[0:]) is True
    assert slice_b.contains_slice(slice_b[1:]) is True
    assert slice_b.contains_slice(slice_b[2:]) is True
    assert slice_b.contains_slice(slice_b[3:]) is True

    assert slice_b.contains_slice(slice_c[0:0]) is False
    assert slice_b.contains_slice(slice_c[0:]) is False
    assert slice_b.contains_slice(slice_c[1:]) is False


@pytest.mark.parametrize("values", LISTS)
def test_offset_of_slice(values):
    _, slice_a, slice_b, slice_c = _parts(values)
    assert slice_b.offset_of_slice(slice_a[3:]) == len(slice_b)

    assert slice_b.offset_of_slice(slice_b[0:]) == 0
    assert slice_b.offset_of_slice(slice_b[1:]) == 1
    assert slice_b.offset_of_slice(slice_b[2:]) == 2
    assert slice_b.offset_of_slice(slice_b[3:]) == 3

    assert slice_b.offset_of_slice(slice_c[0:]) == len(slice_b)
    assert slice_b.offset_of_slice(slice_c[1:]) == len(slice_b)


@pytest.mark.parametrize("values", LISTS)
def test_get_offset_of_slice(values):
    _, slice_a, slice_b, slice_c = _parts(values)
    assert slice_b.get_offset_of_slice(slice_a[3:]) is None

    assert slice_b.get_offset_of_slice(slice_b[1:1]) is None
    assert slice_b.get_offset_of_slice(slice_b[0:]) == 0
    assert slice_b.get_offset_of_slice(slice_b[1:]) == 1
    assert slice_b.get_offset_of_slice(slice_b[2:]) == 2
    assert slice_b.get_offset_of_slice(slice_b[3:]) == 3

    assert slice_b.get_offset_of_slice(slice_c[0:]) is None
    assert slice_b.get_offset_of_slice(slice_c[1:]) is None


@pytest.mark.parametrize("values", LISTS)
def test_index_of(values):
    _, slice_a, slice_b, slice_c = _parts(values)
    assert slice_b.index_of(slice_a.ref(3)) == len(slice_b)

    assert slice_b.index_of(slice_b.ref(0)) == 0
    assert slice_b.index_of(slice_b.ref(1)) == 1
    assert slice_b.index_of(slice_b.ref(2)) == 2
    assert slice_b.index_of(slice_b.ref(3)) == 3

    assert slice_b.index_of(slice_c.ref(0)) == len(slice_b)
    assert slice_b.index_of(slice_c.ref(1)) == len(slice_b)


@pytest.mark.parametrize("values", LISTS)
def test_get_index_of(values):
    _, slice_a, slice_b, slice_c = _parts(values)
    assert slice_b.get_index_of(slice_a.ref(3)) is None

    assert slice_b.get_index_of(slice_b.ref(0)) == 0
    assert slice_b.get_index_of(slice_b.ref(1)) == 1
    assert slice_b.get_index_of(slice_b.ref(2)) == 2
    assert slice_b.get_index_of(slice_b.ref(3)) == 3

    assert slice_b.get_index_of(slice_c.ref(0)) is None
    assert slice_b.get_index_of(slice_c.ref(1)) is None


def test_contains_slice_doc_example():
    data = [0, 1, 2, 3, 4, 5]
    another = SliceView([6, 7, 8])
    lst = SliceView(data)
    assert lst.contains_slice(lst[:1])
    assert lst.contains_slice(lst[3:])
    assert not lst.contains_slice(lst[:0])
    assert not lst.contains_slice(another[:0])
    assert not lst.contains_slice(another)


def test_equal_contents_in_other_base_not_contained():
    lst = SliceView([0, 1, 2, 3])
    copy = SliceView([0, 1, 2, 3])
    assert lst == copy
    assert not lst.contains_slice(copy)
    assert not lst.is_slice(copy)


def test_is_slice_doc_example():
    lst = SliceView([0, 1, 2, 3, 4, 5])
    other = SliceView([0, 1, 2, 3, 4, 5])
    slice_0 = lst[:0]
    slice_1 = lst[:]
    assert slice_0.is_slice(slice_0)
    assert slice_0.is_slice(lst[:0])
    assert not slice_0.is_slice(slice_1)
    assert not slice_0.is_slice(SliceView([]))
    assert not lst.is_slice(other)


def test_offset_of_slice_doc_example():
    lst = SliceView([0, 1, 2, 3, 4, 5])
    other = SliceView([0, 1, 2, 3])
    assert lst.offset_of_slice(lst[:0]) == 0
    assert lst.offset_of_slice(lst[3:]) == 3
    assert lst.offset_of_slice(lst[5:]) == 5
    assert lst.offset_of_slice(lst[6:]) == len(lst)
    assert lst.offset_of_slice(SliceView([])) == len(lst)
    assert lst.offset_of_slice(other) == len(lst)


def test_get_offset_of_slice_doc_example():
    lst = SliceView([0, 1, 2, 3, 4, 5])
    other = SliceView([0, 1, 2, 3])
    assert lst.get_offset_of_slice(lst[:0]) is None
    assert lst.get_offset_of_slice(lst[1:]) == 1
    assert lst.get_offset_of_slice(lst[3:]) == 3
    assert lst.get_offset_of_slice(lst[5:]) == 5
    assert lst.get_offset_of_slice(lst[6:]) is None
    assert lst.get_offset_of_slice(other) is None


def test_index_of_doc_example():
    lst = SliceView([0, 1, 2, 3, 4, 5])
    other = SliceView([0, 1, 2, 3])
    assert lst.index_of(lst.ref(0)) == 0
    assert lst.index_of(lst.ref(3)) == 3
    assert lst.index_of(lst.ref(5)) == 5
    assert lst.index_of(lst.ref(6)) == 6
    assert lst.index_of(lst.ref(7)) == 6
    assert lst.index_of(SliceView([0]).ref(0)) == len(lst)
    assert lst.index_of(other.ref(0)) == len(lst)
    assert lst.index_of(other.ref(1)) == len(lst)


def test_get_index_of_doc_example():
    lst = SliceView([0, 1, 2, 3, 4, 5])
    other = SliceView([0, 1, 2, 3])
    assert lst.get_index_of(lst.ref(0)) == 0
    assert lst.get_index_of(lst.ref(3)) == 3
    assert lst.get_index_of(lst.ref(5)) == 5
    assert lst.get_index_of(lst.ref(6)) is None
    assert lst.get_index_of(lst.ref(7)) is None
    assert lst.get_index_of(SliceView([0]).ref(0)) is None
    assert lst.get_index_of(other.ref(0)) is None
    assert lst.get_index_of(other.ref(1)) is None


def test_str_base_examples():
    string = SliceView("foo bar baz")
    another = SliceView("".join(["foo bar", " baz"]))
    foo = string[:3]
    bar = string[4:7]
    baz = string[8:11]

    assert string.contains_slice(foo)
    assert string.contains_slice(bar)
    assert string.contains_slice(baz)
    assert not string.contains_slice(string[:0])
    assert not string.contains_slice(another)

    assert not string.is_slice(foo)
    assert string.is_slice(string)
    assert string[:0].is_slice(string[:0])

    assert string.offset_of_slice(string) == 0
    assert string.offset_of_slice(bar) == 4
    assert string.offset_of_slice(baz) == 8
    assert string.offset_of_slice(string[11:]) == 11
    assert string.offset_of_slice(another) == len(string)

    assert string.get_offset_of_slice(string) == 0
    assert string.get_offset_of_slice(baz) == 8
    assert string.get_offset_of_slice(string[11:]) is None
    assert string.get_offset_of_slice(another) is None


def test_str_index_of():
    string = SliceView("abcdefgh")
    other = SliceView("ABCDEFGH")
    assert string.index_of(string.ref(3)) == 3
    assert string.index_of(string.ref(7)) == 7
    assert string.get_index_of(string.ref(7)) == 7
    assert string.index_of(other.ref(0)) == len(string)
    assert string.get_index_of(other.ref(1)) is None


def test_view_contents_and_nesting():
    data = [10, 20, 30, 40, 50]
    view = SliceView(data, 1, 4)
    assert len(view) == 3
    assert view.to_list() == [20, 30, 40]
    assert view[0] == 20
    assert view[-1] == 40
    inner = view[1:]
    assert inner.to_list() == [30, 40]
    assert inner.start == 2
    assert view.get_offset_of_slice(inner) == 1
    nested = SliceView(view, 1, 2)
    assert nested.is_slice(view[1:2])


def test_element_ref_equality():
    data = [1, 2, 3]
    view = SliceView(data)
    assert view.ref(1) == ElementRef(data, 1)
    assert view[1:].ref(0) == view.ref(1)
    assert view.ref(1) != ElementRef([1, 2, 3], 1)


def test_invalid_ranges_raise():
    with pytest.raises(IndexError):
        SliceView([1, 2], 2, 1)
    with pytest.raises(IndexError):
        SliceView([1, 2], 0, 3)
    view = SliceView([1, 2, 3])
    with pytest.raises(IndexError):
        view[3]
    with pytest.raises(IndexError):
        view[2:5]
    with pytest.raises(ValueError):
        view[::2]


def test_index_of_requires_element_ref():
    view = SliceView([1, 2, 3])
    with pytest.raises(TypeError):
        view.index_of(1)
    with pytest.raises(TypeError):
        view.get_index_of(1)