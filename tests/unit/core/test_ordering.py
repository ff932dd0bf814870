"""Tests for the aircraft service order."""

import itertools
import random

from airportsim import Aircraft, Heading, comes_before, service_key


def _all_pairs(records):
    return itertools.product(records, repeat=2)


class TestCascade:
    """Each step of the tie-break cascade."""

    def test_lower_priority_wins(self, make_aircraft):
        high = make_aircraft(id=9, priority=1, heading=Heading.ARRIVING)
        low = make_aircraft(id=1, priority=2, heading=Heading.DEPARTING)

        assert comes_before(high, low)
        assert not comes_before(low, high)

    def test_departing_before_arriving_on_equal_priority(self, make_aircraft):
        dep = make_aircraft(id=5, priority=3, heading=Heading.DEPARTING)
        arr = make_aircraft(id=1, priority=3, heading=Heading.ARRIVING)

        assert comes_before(dep, arr)
        assert not comes_before(arr, dep)

    def test_heading_rule_is_asymmetric_regardless_of_call_order(self, make_aircraft):
        """Identical except heading: departing always first, never the reverse."""
        dep = make_aircraft(id=7, priority=2, heading=Heading.DEPARTING)
        arr = make_aircraft(id=7, priority=2, heading=Heading.ARRIVING)

        assert comes_before(dep, arr) is True
        assert comes_before(arr, dep) is False

    def test_lower_id_wins_when_priority_and_heading_tie(self, make_aircraft):
        for heading in Heading:
            a = make_aircraft(id=1, priority=4, heading=heading)
            b = make_aircraft(id=2, priority=4, heading=heading)

            assert comes_before(a, b)
            assert not comes_before(b, a)

    def test_entry_time_is_ignored(self, make_aircraft):
        early = make_aircraft(id=2, entry_time=0)
        late = make_aircraft(id=1, entry_time=50)

        assert comes_before(late, early)

    def test_fully_tied_records_are_unordered(self, make_aircraft):
        a = make_aircraft(id=3, priority=1)
        b = make_aircraft(id=3, priority=1, entry_time=8)

        assert not comes_before(a, b)
        assert not comes_before(b, a)


class TestStrictWeakOrdering:
    """comes_before is irreflexive, asymmetric and transitive."""

    records = [
        Aircraft(0, i, heading, p)
        for i in range(3)
        for heading in Heading
        for p in range(3)
    ]

    def test_irreflexive(self):
        for r in self.records:
            assert not comes_before(r, r)

    def test_asymmetric(self):
        for x, y in _all_pairs(self.records):
            assert not (comes_before(x, y) and comes_before(y, x))

    def test_transitive(self):
        for x, y, z in itertools.product(self.records, repeat=3):
            if comes_before(x, y) and comes_before(y, z):
                assert comes_before(x, z)


class TestServiceKey:
    def test_key_agrees_with_comparator(self):
        records = TestStrictWeakOrdering.records
        for x, y in _all_pairs(records):
            assert comes_before(x, y) == (service_key(x) < service_key(y))

    def test_sorting_by_key(self):
        rng = random.Random(7)
        records = [
            Aircraft(0, 2, Heading.ARRIVING, 1),
            Aircraft(0, 1, Heading.ARRIVING, 1),
            Aircraft(0, 3, Heading.DEPARTING, 1),
            Aircraft(0, 0, Heading.ARRIVING, 0),
        ]
        shuffled = records[:]
        rng.shuffle(shuffled)

        assert [a.id for a in sorted(shuffled, key=service_key)] == [0, 3, 1, 2]
