import pytest

import correspond._bimap as bimap


def test_lookup_both_directions():
    m = bimap.BiMap({"a": 1, "b": 2})

    assert m["a"] == 1
    assert m.inverse[2] == "b"
    assert m.inverse.inverse == m
    assert len(m) == 2
    assert list(m) == ["a", "b"]


def test_duplicate_value():
    with pytest.raises(ValueError) as execinfo:
        bimap.BiMap([("a", 1), ("b", 1)])
    assert "Duplicate value" in str(execinfo.value)


def test_duplicate_key():
    with pytest.raises(ValueError) as execinfo:
        bimap.BiMap([("a", 1), ("a", 2)])
    assert "Duplicate key" in str(execinfo.value)


def test_force_put_replaces_key():
    m = bimap.MutableBiMap({"a": 1})

    m.force_put("a", 2)

    assert m == {"a": 2}
    assert m.inverse == {2: "a"}


def test_force_put_replaces_value():
    m = bimap.MutableBiMap({"a": 1, "b": 2})

    m.force_put("c", 1)

    assert m == {"b": 2, "c": 1}
    assert m.inverse == {1: "c", 2: "b"}


def test_force_put_replaces_both():
    m = bimap.MutableBiMap({"a": 1, "b": 2})

    m.force_put("a", 2)

    assert m == {"a": 2}
    assert m.inverse == {2: "a"}


def test_inverse_follows_updates():
    m = bimap.MutableBiMap()
    inverse = m.inverse

    m.force_put("a", 1)

    assert inverse[1] == "a"


def test_frozen_is_a_copy():
    m = bimap.MutableBiMap({"a": 1})
    frozen = m.frozen()

    m.force_put("b", 1)

    assert frozen == {"a": 1}
    assert frozen.inverse == {1: "a"}
    assert not hasattr(frozen, "force_put")


def test_none_values_are_allowed():
    m = bimap.MutableBiMap({"a": None})

    m.force_put("b", None)

    assert m == {"b": None}


def test_repr():
    assert repr(bimap.BiMap({"a": 1})) == "BiMap({'a': 1})"
