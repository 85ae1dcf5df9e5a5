import pytest

from ratedtables.records import DatValue, TabRecord


class _Value(DatValue):
    def __init__(self, text):
        self.text = text

    def copy(self):
        return _Value(self.text)

    def __str__(self):
        return self.text


def test_dat_value_is_abstract():
    with pytest.raises(TypeError):
        DatValue()


def test_records_equal_by_key_only():
    assert TabRecord("alice", _Value("x")) == TabRecord("alice", _Value("y"))
    assert not (TabRecord("alice") == TabRecord("bob"))


def test_ordering_follows_keys():
    low, high = TabRecord("alice"), TabRecord("bob")
    assert low < high
    assert high > low
    assert not (low > high)


def test_sorting_records_orders_by_key():
    records = [TabRecord("carol"), TabRecord("alice"), TabRecord("bob")]
    assert [r.key for r in sorted(records)] == ["alice", "bob", "carol"]


def test_str_joins_key_and_value():
    assert str(TabRecord("alice", _Value("x"))) == "alice : x"


def test_copy_returns_independent_data():
    value = _Value("x")
    record = TabRecord("alice", value)
    copied = record.copy()
    assert copied.text == "x" and copied is not value


def test_copy_without_data_is_none():
    assert TabRecord("alice").copy() is None


def test_default_record_has_empty_key():
    record = TabRecord()
    assert record.key == "" and record.data is None


def test_comparison_with_other_type_is_false():
    assert (TabRecord("alice") == "alice") is False