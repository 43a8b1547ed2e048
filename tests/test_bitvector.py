"""Tests for :class:`checkboxes.engine.bitvector.BitVector`."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from checkboxes.engine.bitvector import BitVector


def test_initially_unchecked() -> None:
    vector = BitVector(200)
    assert not any(vector.is_checked(i) for i in range(200))
    assert vector.count_checked() == 0
    assert vector.snapshot() == [False] * 200


def test_small_board_end_to_end() -> None:
    vector = BitVector(8)
    for index in (0, 2, 5):
        vector.toggle(index)
    assert vector.count_checked() == 3
    assert vector.snapshot() == [True, False, True, False, False, True, False, False]


@pytest.mark.parametrize("times,expected", [(1, True), (2, False), (3, True), (6, False)])
def test_toggle_parity(times: int, expected: bool) -> None:
    vector = BitVector(100)
    for _ in range(times):
        vector.toggle(42)
    assert vector.is_checked(42) is expected
    assert vector.count_checked() == int(expected)


def test_word_boundaries() -> None:
    vector = BitVector(130)
    for index in (0, 63, 64, 127, 128, 129):
        vector.toggle(index)
    snap = vector.snapshot()
    assert len(snap) == 130
    assert [i for i, flag in enumerate(snap) if flag] == [0, 63, 64, 127, 128, 129]
    assert vector.count_checked() == 6
    assert all(snap[i] == vector.is_checked(i) for i in range(130))


@pytest.mark.parametrize("index", [-1, 8, 100])
def test_out_of_range_rejected_without_mutation(index: int) -> None:
    vector = BitVector(8)
    vector.toggle(3)
    before = vector.snapshot()
    with pytest.raises(IndexError):
        vector.toggle(index)
    with pytest.raises(IndexError):
        vector.is_checked(index)
    assert vector.snapshot() == before
    assert vector.count_checked() == 1


def test_non_int_index_rejected() -> None:
    vector = BitVector(8)
    with pytest.raises(TypeError):
        vector.toggle("1")  # type: ignore[arg-type]
    with pytest.raises(TypeError):
        vector.is_checked(True)  # type: ignore[arg-type]


def test_constructor_validation() -> None:
    with pytest.raises(ValueError):
        BitVector(-1)
    with pytest.raises(TypeError):
        BitVector(1.5)  # type: ignore[arg-type]
    with pytest.raises(ValueError):
        BitVector(10, segment_words=0)


def test_empty_vector() -> None:
    vector = BitVector(0)
    assert len(vector) == 0
    assert vector.snapshot() == []
    assert vector.count_checked() == 0
    with pytest.raises(IndexError):
        vector.toggle(0)


def test_snapshot_is_a_copy() -> None:
    vector = BitVector(10)
    vector.toggle(1)
    snap = vector.snapshot()
    vector.toggle(1)
    vector.toggle(2)
    assert snap[1] is True
    assert snap[2] is False
    snap[5] = True
    assert vector.is_checked(5) is False


def test_sequence_protocol() -> None:
    vector = BitVector(5)
    vector.toggle(4)
    assert len(vector) == 5
    assert vector.capacity == 5
    assert vector[4] is True
    assert list(vector) == [False, False, False, False, True]
    assert repr(vector) == "BitVector(capacity=5, checked=1)"


def test_count_matches_snapshot_across_segments() -> None:
    vector = BitVector(10_000, segment_words=3)
    for index in range(0, 10_000, 7):
        vector.toggle(index)
    snap = vector.snapshot()
    assert len(snap) == 10_000
    assert vector.count_checked() == sum(snap) == len(range(0, 10_000, 7))


def test_default_capacity_size() -> None:
    vector = BitVector(1_000_000)
    vector.toggle(999_999)
    snap = vector.snapshot()
    assert len(snap) == 1_000_000
    assert snap[999_999] is True
    assert vector.count_checked() == 1


@pytest.mark.parametrize("toggles", [1000, 1001])
def test_concurrent_toggles_same_index(toggles: int) -> None:
    vector = BitVector(128)
    with ThreadPoolExecutor(max_workers=16) as pool:
        list(pool.map(lambda _: vector.toggle(7), range(toggles)))
    assert vector.is_checked(7) is bool(toggles % 2)
    assert vector.count_checked() == toggles % 2


def test_concurrent_toggles_share_a_word() -> None:
    vector = BitVector(64)
    rounds = 201

    def flip_many(index: int) -> None:
        for _ in range(rounds):
            vector.toggle(index)

    with ThreadPoolExecutor(max_workers=64) as pool:
        list(pool.map(flip_many, range(64)))
    assert vector.snapshot() == [True] * 64
    assert vector.count_checked() == 64
