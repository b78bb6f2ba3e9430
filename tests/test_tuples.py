import pytest

from loutil.tuples import (
    t2,
    t3,
    t4,
    t5,
    t6,
    t7,
    t8,
    t9,
    unpack2,
    unpack3,
    unpack4,
    unpack5,
    unpack6,
    unpack7,
    unpack8,
    unpack9,
    zip2,
    zip3,
    zip4,
    zip5,
    zip6,
    zip7,
    zip8,
    zip9,
    zip_by2,
    zip_by3,
    zip_by4,
    zip_by5,
    zip_by6,
    zip_by7,
    zip_by8,
    zip_by9,
)
from loutil.types import (
    Tuple2,
    Tuple3,
    Tuple4,
    Tuple5,
    Tuple6,
    Tuple7,
    Tuple8,
    Tuple9,
)

LETTERS = ["a", "b", "c", "d", "e", "f", "g", "h", "i"]
F32 = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8, 0.9]
F64 = [0.01, 0.02, 0.03, 0.04, 0.05, 0.06, 0.07, 0.08, 0.09]
SMALL = [1, 2, 3, 4, 5, 6, 7, 8, 9]


def _columns(n):
    """The input lists used by the zip cases for n-tuples."""
    return [
        LETTERS[:n],
        SMALL[:n],
        list(range(n + 1, 2 * n + 1)),
        [True] * n,
        F32[:n],
        F64[:n],
        SMALL[:n],
        SMALL[:n],
        SMALL[:n],
    ][:n]


def test_t():
    assert t2("a", 1) == Tuple2(a="a", b=1)
    assert t3("b", 2, 3.0) == Tuple3(a="b", b=2, c=3.0)
    assert t4("c", 3, 4.0, True) == Tuple4(a="c", b=3, c=4.0, d=True)
    assert t5("d", 4, 5.0, False, "e") == Tuple5("d", 4, 5.0, False, "e")
    assert t6("f", 5, 6.0, True, "g", 7) == Tuple6("f", 5, 6.0, True, "g", 7)
    assert t7("h", 6, 7.0, False, "i", 8, 9.0) == Tuple7(
        "h", 6, 7.0, False, "i", 8, 9.0
    )
    assert t8("j", 7, 8.0, True, "k", 9, 10.0, False) == Tuple8(
        "j", 7, 8.0, True, "k", 9, 10.0, False
    )
    assert t9("l", 8, 9.0, False, "m", 10, 11.0, True, "n") == Tuple9(
        "l", 8, 9.0, False, "m", 10, 11.0, True, "n"
    )


UNPACK_VALUES = ["a", 1, 1.0, True, "b", 2, 3.0, True, "c"]


@pytest.mark.parametrize(
    "cls, unpack",
    [
        (Tuple2, unpack2),
        (Tuple3, unpack3),
        (Tuple4, unpack4),
        (Tuple5, unpack5),
        (Tuple6, unpack6),
        (Tuple7, unpack7),
        (Tuple8, unpack8),
        (Tuple9, unpack9),
    ],
)
def test_unpack(cls, unpack):
    size = int(cls.__name__[-1])
    values = UNPACK_VALUES[:size]
    tuple_ = cls(*values)
    assert unpack(tuple_) == tuple(values)
    assert tuple_.unpack() == tuple(values)


def test_unpack2_destructures():
    r1, r2 = unpack2(Tuple2("a", 1))
    assert r1 == "a"
    assert r2 == 1


def test_zip2():
    assert zip2(["a", "b"], [1, 2]) == [Tuple2("a", 1), Tuple2("b", 2)]


def test_zip3():
    assert zip3(["a", "b", "c"], [1, 2, 3], [4, 5, 6]) == [
        Tuple3("a", 1, 4),
        Tuple3("b", 2, 5),
        Tuple3("c", 3, 6),
    ]


def test_zip4():
    assert zip4(*_columns(4)) == [
        Tuple4("a", 1, 5, True),
        Tuple4("b", 2, 6, True),
        Tuple4("c", 3, 7, True),
        Tuple4("d", 4, 8, True),
    ]


def test_zip5():
    assert zip5(*_columns(5)) == [
        Tuple5("a", 1, 6, True, 0.1),
        Tuple5("b", 2, 7, True, 0.2),
        Tuple5("c", 3, 8, True, 0.3),
        Tuple5("d", 4, 9, True, 0.4),
        Tuple5("e", 5, 10, True, 0.5),
    ]


def test_zip6():
    assert zip6(*_columns(6)) == [
        Tuple6("a", 1, 7, True, 0.1, 0.01),
        Tuple6("b", 2, 8, True, 0.2, 0.02),
        Tuple6("c", 3, 9, True, 0.3, 0.03),
        Tuple6("d", 4, 10, True, 0.4, 0.04),
        Tuple6("e", 5, 11, True, 0.5, 0.05),
        Tuple6("f", 6, 12, True, 0.6, 0.06),
    ]


EXPECTED7 = [
    Tuple7("a", 1, 8, True, 0.1, 0.01, 1),
    Tuple7("b", 2, 9, True, 0.2, 0.02, 2),
    Tuple7("c", 3, 10, True, 0.3, 0.03, 3),
    Tuple7("d", 4, 11, True, 0.4, 0.04, 4),
    Tuple7("e", 5, 12, True, 0.5, 0.05, 5),
    Tuple7("f", 6, 13, True, 0.6, 0.06, 6),
    Tuple7("g", 7, 14, True, 0.7, 0.07, 7),
]

EXPECTED8 = [
    Tuple8("a", 1, 9, True, 0.1, 0.01, 1, 1),
    Tuple8("b", 2, 10, True, 0.2, 0.02, 2, 2),
    Tuple8("c", 3, 11, True, 0.3, 0.03, 3, 3),
    Tuple8("d", 4, 12, True, 0.4, 0.04, 4, 4),
    Tuple8("e", 5, 13, True, 0.5, 0.05, 5, 5),
    Tuple8("f", 6, 14, True, 0.6, 0.06, 6, 6),
    Tuple8("g", 7, 15, True, 0.7, 0.07, 7, 7),
    Tuple8("h", 8, 16, True, 0.8, 0.08, 8, 8),
]

EXPECTED9 = [
    Tuple9("a", 1, 10, True, 0.1, 0.01, 1, 1, 1),
    Tuple9("b", 2, 11, True, 0.2, 0.02, 2, 2, 2),
    Tuple9("c", 3, 12, True, 0.3, 0.03, 3, 3, 3),
    Tuple9("d", 4, 13, True, 0.4, 0.04, 4, 4, 4),
    Tuple9("e", 5, 14, True, 0.5, 0.05, 5, 5, 5),
    Tuple9("f", 6, 15, True, 0.6, 0.06, 6, 6, 6),
    Tuple9("g", 7, 16, True, 0.7, 0.07, 7, 7, 7),
    Tuple9("h", 8, 17, True, 0.8, 0.08, 8, 8, 8),
    Tuple9("i", 9, 18, True, 0.9, 0.09, 9, 9, 9),
]


def test_zip7():
    assert zip7(*_columns(7)) == EXPECTED7


def test_zip8():
    assert zip8(*_columns(8)) == EXPECTED8


def test_zip9():
    assert zip9(*_columns(9)) == EXPECTED9


def test_zip_pads_shorter_lists_with_none():
    assert zip2(["a", "b", "c"], [1]) == [
        Tuple2("a", 1),
        Tuple2("b", None),
        Tuple2("c", None),
    ]
    assert zip3([], [1, 2], ["x"]) == [Tuple3(None, 1, "x"), Tuple3(None, 2, None)]


def test_zip_of_empty_lists_is_empty():
    assert zip2([], []) == []


def test_zip_by():
    assert zip_by2(["a", "b"], [1, 2], t2) == [Tuple2("a", 1), Tuple2("b", 2)]
    assert zip_by3(["a", "b", "c"], [1, 2, 3], [4, 5, 6], t3) == [
        Tuple3("a", 1, 4),
        Tuple3("b", 2, 5),
        Tuple3("c", 3, 6),
    ]
    assert zip_by4(*_columns(4), t4) == zip4(*_columns(4))
    assert zip_by5(*_columns(5), t5) == zip5(*_columns(5))
    assert zip_by6(*_columns(6), t6) == zip6(*_columns(6))
    assert zip_by7(*_columns(7), t7) == EXPECTED7
    assert zip_by8(*_columns(8), t8) == EXPECTED8
    assert zip_by9(*_columns(9), t9) == EXPECTED9


def test_zip_by_applies_iteratee():
    assert zip_by2(["a", "b"], [1, 2], lambda s, n: s * n) == ["a", "bb"]


def test_zip_by_pads_with_none():
    assert zip_by2([1, 2], [10], lambda x, y: (x, y)) == [(1, 10), (2, None)]


def test_zip_by7_length_follows_first_six_lists():
    result = zip_by7([1], [2], [3], [4], [5], [6], [7, 8], lambda *row: row)
    assert result == [(1, 2, 3, 4, 5, 6, 7)]


def test_zip_by8_length_follows_first_seven_lists():
    result = zip_by8([1], [2], [3], [4], [5], [6], [7], [8, 9], lambda *row: row)
    assert result == [(1, 2, 3, 4, 5, 6, 7, 8)]