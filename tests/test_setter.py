from unittest.mock import Mock

import pytest

from nestedstate import (
    InvalidContainer,
    ReadThroughAbsent,
    Replace,
    Transform,
    is_function,
    provide,
    provide_nested_setter,
)


def set_state_mock(original_state):
    """Root setter that returns the committed value without storing it."""

    def set_state(action):
        if is_function(action):
            return action(original_state)
        return action

    return set_state


def get_test_state():
    return {
        "key1": 0,
        "key2": "abc",
        "key3": [5, 6, 7],
        "key4": {"key5": "xyz", "key6": 8},
    }


def get_nested_state():
    return {
        "key1": [
            {
                "key3": [
                    {
                        "key5": [
                            {"key7": {"key8": "abc", "key8b": 5}},
                            {"key7": {"key8": "def", "key8b": 6}},
                        ]
                    }
                ]
            }
        ]
    }


DEEP_PATH = ["key1", 0, "key3", 0, "key5", 1, "key7"]


def test_the_mock_takes_a_value():
    set_state = Mock(wraps=set_state_mock({"a": 5, "b": "abc"}))
    assert set_state({"a": 11, "b": "xyz"}) == {"a": 11, "b": "xyz"}


def test_the_mock_takes_a_callback():
    set_state = set_state_mock({"a": 5, "b": "abc"})
    callback = Mock(side_effect=lambda prev: {**prev, "a": prev["a"] + 11})
    assert set_state(callback) == {"a": 16, "b": "abc"}
    callback.assert_called_once()


def test_is_function():
    assert is_function(lambda: None)
    assert is_function(print)
    for value in ["notFunc", 4, float("nan"), {"f": lambda: None}, [lambda: None], None]:
        assert not is_function(value)


def test_single_key():
    root = Mock(wraps=set_state_mock(get_test_state()))
    set_nested = provide(root, ["key1"])
    result = set_nested(10)
    root.assert_called_once()
    assert result == {**get_test_state(), "key1": 10}


def test_root_setter_receives_a_function():
    root = Mock(wraps=set_state_mock(get_test_state()))
    provide(root, ["key1"])(10)
    (arg,), _ = root.call_args
    assert callable(arg)


def test_nested_array():
    root = set_state_mock(get_test_state())
    set_nested = provide_nested_setter(root, "key3", 1)
    assert set_nested(-9)["key3"] == [5, -9, 7]


def test_seven_levels_deep():
    original = get_nested_state()
    root = Mock(wraps=set_state_mock(original))
    set_nested = provide(root, DEEP_PATH)
    result = set_nested({"key8": "xyz", "key8b": 12})
    root.assert_called_once()
    expected = get_nested_state()
    expected["key1"][0]["key3"][0]["key5"][1]["key7"] = {"key8": "xyz", "key8b": 12}
    assert result == expected


def test_seven_levels_deep_with_callback():
    original = get_nested_state()
    root = Mock(wraps=set_state_mock(original))
    set_nested = provide(root, DEEP_PATH)
    callback = Mock(side_effect=lambda prev: {**prev, "key8": prev["key8"] + "xyz"})

    result = set_nested(callback)

    callback.assert_called_once_with({"key8": "def", "key8b": 6})
    root.assert_called_once()
    key5 = result["key1"][0]["key3"][0]["key5"]
    assert key5[1]["key7"] == {"key8": "defxyz", "key8b": 6}
    assert key5[0] is original["key1"][0]["key3"][0]["key5"][0]
    assert original["key1"][0]["key3"][0]["key5"][1]["key7"]["key8"] == "def"


def test_single_key_with_callback():
    root = set_state_mock(get_test_state())
    set_nested = provide(root, ["key4"])
    result = set_nested(lambda prev: {**prev, "key6": prev["key6"] + 8})
    assert result["key4"] == {"key5": "xyz", "key6": 16}
    assert result["key3"] == [5, 6, 7]


def test_can_be_called_repeatedly():
    root = Mock(wraps=set_state_mock(get_test_state()))
    set_nested = provide(root, ["key1"])
    for count, value in enumerate([10, 12, -3], start=1):
        result = set_nested(value)
        assert root.call_count == count
        assert result == {**get_test_state(), "key1": value}


def test_each_call_uses_previous_supplied_by_root():
    state = {"counter": {"n": 0}}

    def root(action):
        nonlocal state
        state = action(state) if callable(action) else action
        return state

    increment = provide(root, ["counter", "n"])
    increment(lambda n: n + 1)
    increment(lambda n: n + 1)
    assert state == {"counter": {"n": 2}}


def test_replace_stores_a_callable_literally():
    root = set_state_mock({"handler": None})
    fn = lambda value: value  # noqa: E731
    result = provide(root, ["handler"])(Replace(fn))
    assert result["handler"] is fn


def test_explicit_transform():
    root = set_state_mock({"n": 2})
    assert provide(root, ["n"])(Transform(lambda n: n * 10)) == {"n": 20}


def test_transform_of_missing_leaf_receives_absent():
    from nestedstate import ABSENT

    root = set_state_mock({})
    result = provide(root, ["new"])(lambda prev: "created" if prev is ABSENT else prev)
    assert result == {"new": "created"}


def test_scoped_setters_compose():
    root = set_state_mock(get_test_state())
    set_key4 = provide(root, ["key4"])
    set_key6 = provide(set_key4, ["key6"])
    assert set_key6(lambda n: n + 1)["key4"] == {"key5": "xyz", "key6": 9}


def test_dotted_path():
    root = set_state_mock(get_nested_state())
    result = provide(root, "key1[0].key3[0].key5[0].key7.key8b")(50)
    assert result["key1"][0]["key3"][0]["key5"][0]["key7"]["key8b"] == 50


def test_provide_does_not_raise_for_bad_path():
    root = set_state_mock({"a": 1})
    set_nested = provide(root, ["a", "b"])
    with pytest.raises(InvalidContainer):
        set_nested(2)


def test_callback_read_errors_propagate():
    root = set_state_mock({"a": [1]})
    with pytest.raises(ReadThroughAbsent):
        provide(root, ["a", "x", "y"])(lambda prev: prev)


def test_later_mutation_of_path_list_has_no_effect():
    root = set_state_mock(get_test_state())
    path = ["key1"]
    set_nested = provide(root, path)
    path.append("oops")
    assert set_nested(3)["key1"] == 3
