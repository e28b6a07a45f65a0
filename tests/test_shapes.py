"""Tests for list response-shape decoding."""
import pytest

from nodepacks.streak.shapes import Shape, as_list, decode


class TestDecode:
    """Each raw shape maps to exactly one tag, checked in priority order."""

    @pytest.mark.parametrize("raw", [None, "", [], {}])
    def test_empty(self, raw):
        assert decode(raw) == (Shape.EMPTY, [])

    def test_nested_results_are_flattened(self):
        raw = [
            {"results": [{"key": "t1"}, {"key": "t2"}]},
            {"results": [{"key": "t3"}]},
        ]
        decoded = decode(raw)
        assert decoded.shape == Shape.NESTED_RESULTS
        assert [t["key"] for t in decoded.items] == ["t1", "t2", "t3"]

    def test_keyed_map_in_list(self):
        raw = [{"5001": {"key": "5001", "name": "Lead"}, "5002": {"key": "5002", "name": "Won"}}]
        decoded = decode(raw)
        assert decoded.shape == Shape.KEYED_MAP
        assert [s["name"] for s in decoded.items] == ["Lead", "Won"]

    def test_plain_array(self):
        raw = [{"key": "p1"}, {"key": "p2"}]
        assert decode(raw) == (Shape.ARRAY, raw)

    def test_single_entity_list_is_array(self):
        raw = [{"key": "p1", "name": "Sales"}]
        assert decode(raw).shape == Shape.ARRAY

    @pytest.mark.parametrize("envelope", ["results", "data", "stages", "tasks", "items", "boxes"])
    def test_envelope_keys(self, envelope):
        decoded = decode({envelope: [{"key": "x"}], "count": 1})
        assert decoded == (Shape.ENVELOPE, [{"key": "x"}])

    def test_envelope_priority_follows_key_order(self):
        decoded = decode({"data": [{"key": "d"}], "results": [{"key": "r"}]})
        assert decoded.items == [{"key": "r"}]

    def test_keyed_map_dict(self):
        raw = {"s1": {"key": "s1", "name": "Lead"}}
        assert decode(raw) == (Shape.KEYED_MAP, [{"key": "s1", "name": "Lead"}])

    def test_single_object(self):
        raw = {"key": "p1", "name": "Sales"}
        assert decode(raw) == (Shape.SINGLE, [raw])

    def test_custom_envelope_keys(self):
        raw = {"entries": [{"key": "e1"}]}
        assert decode(raw).shape == Shape.SINGLE
        assert decode(raw, envelope_keys=("entries",)).items == [{"key": "e1"}]


def test_as_list_returns_items():
    assert as_list({"results": [1, 2]}) == [1, 2]
    assert as_list(None) == []
