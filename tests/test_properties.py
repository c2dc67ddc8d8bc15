"""Algebraic laws checked over every pair from a pool of sample sequences.

Each law is also cross-checked against plain Python sets built from the
covered values.
"""

import itertools

import pytest

from intseq import NON_NEGATIVE, Sequence

POOL_TEXT = [
    "",
    "0",
    "0-4,6-7,9",
    "1-10,20-22,25-27",
    "2-3,5-6,21-22,24-27",
    "21,26-27",
    "5-9,19-29",
    "11-19,23,35-40",
    "1-40",
    "188,468,472,474",
    "468-473",
    "1,3,5,7,9,11",
]
POOL: list[Sequence] = [NON_NEGATIVE.parse(text) for text in POOL_TEXT]
PAIRS = list(itertools.product(POOL, repeat=2))
PAIR_IDS = [f"{{{a}}}x{{{b}}}" for a, b in PAIRS]
SINGLE_IDS = [f"{{{a}}}" for a in POOL]

EMPTY = NON_NEGATIVE.empty()


def as_set(sequence: Sequence) -> set[int]:
    return set(sequence.values())


@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_union(a: Sequence, b: Sequence) -> None:
    assert a.union(b) == b.union(a)
    assert as_set(a | b) == as_set(a) | as_set(b)
    assert a.union(b).contains(a)


@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_intersect(a: Sequence, b: Sequence) -> None:
    assert a.intersect(b) == b.intersect(a)
    assert as_set(a & b) == as_set(a) & as_set(b)
    assert a.contains(a.intersect(b))


@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_difference(a: Sequence, b: Sequence) -> None:
    assert as_set(a - b) == as_set(a) - as_set(b)
    assert (a - b).disjoint(b)


@pytest.mark.parametrize("a,b", PAIRS, ids=PAIR_IDS)
def test_overlap_and_containment(a: Sequence, b: Sequence) -> None:
    assert a.overlap(b) == bool(as_set(a) & as_set(b))
    assert a.disjoint(b) is not a.overlap(b)
    assert a.contains(b) == as_set(b).issubset(as_set(a))


@pytest.mark.parametrize("a", POOL, ids=SINGLE_IDS)
def test_identities(a: Sequence) -> None:
    assert a == a
    assert a.contains(a)
    assert a.union(EMPTY) == a
    assert a.intersect(EMPTY) == EMPTY


@pytest.mark.parametrize("a", POOL, ids=SINGLE_IDS)
def test_text_round_trip(a: Sequence) -> None:
    assert NON_NEGATIVE.parse(str(a)) == a


@pytest.mark.parametrize("a", POOL, ids=SINGLE_IDS)
def test_length_counts_members(a: Sequence) -> None:
    if a.is_empty():
        assert a.length() == 0
        return
    covered = range(a.first_value(), a.last_value() + 1)
    assert a.length() == sum(1 for value in covered if a.contains(value))


@pytest.mark.parametrize("a", POOL, ids=SINGLE_IDS)
def test_after_and_close_partition(a: Sequence) -> None:
    for cut in (0, 5, 9, 22, 470):
        assert a.close(cut) | a.after(cut) == a
        assert a.close(cut).disjoint(a.after(cut))
        assert all(value <= cut for value in a.close(cut).values())
        assert all(value > cut for value in a.after(cut).values())


@pytest.mark.parametrize("a", POOL, ids=SINGLE_IDS)
def test_rebuild_from_values(a: Sequence) -> None:
    assert NON_NEGATIVE.to_sequence(a.values()) == a
