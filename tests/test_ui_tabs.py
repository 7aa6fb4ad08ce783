import pytest

from quadgfx.ui_input import Input, InputCharacter, KeyCode
from quadgfx.ui_tabs import AnyStorage, TabSelector


def _input(*characters):
    state = Input()
    state.input_buffer.extend(characters)
    return state


def _frame(selector, focused_index, count, state):
    results = []
    for index in range(count):
        results.append(
            selector.register_selectable_widget(index == focused_index, state)
        )
    selector.new_frame()
    return results


def test_no_tab_no_focus_change():
    selector = TabSelector()
    results = _frame(selector, 0, 3, Input())
    assert results == [False, False, False]
    assert _frame(selector, 0, 3, Input()) == [False, False, False]


def test_tab_moves_to_next_widget():
    selector = TabSelector()
    _frame(selector, 0, 3, _input(InputCharacter(KeyCode.TAB)))
    assert selector.to_change == 1
    results = _frame(selector, None, 3, Input())
    assert results == [False, True, False]


def test_shift_tab_from_first_wraps_to_last():
    selector = TabSelector()
    _frame(selector, 0, 3, _input(InputCharacter(KeyCode.TAB, modifier_shift=True)))
    results = _frame(selector, None, 3, Input())
    assert results == [False, False, True]


def test_tab_from_last_wraps_to_first():
    selector = TabSelector()
    _frame(selector, 2, 3, _input(InputCharacter(KeyCode.TAB)))
    results = _frame(selector, None, 3, Input())
    assert results == [True, False, False]


def test_other_keys_ignored():
    selector = TabSelector()
    _frame(selector, 0, 2, _input(InputCharacter("a"), InputCharacter(KeyCode.ENTER)))
    assert selector.to_change is None


def test_focus_granted_only_once():
    selector = TabSelector()
    _frame(selector, 0, 2, _input(InputCharacter(KeyCode.TAB)))
    assert _frame(selector, None, 2, Input()) == [False, True]
    assert _frame(selector, None, 2, Input()) == [False, False]


def test_new_frame_resets_counter():
    selector = TabSelector()
    selector.register_selectable_widget(False, Input())
    selector.register_selectable_widget(False, Input())
    assert selector.counter == 2
    selector.new_frame()
    assert selector.counter == 0
    assert selector.wants is None


def test_any_storage_insert_and_reuse():
    storage = AnyStorage()
    first = storage.get_or_insert_with(7, list)
    first.append("x")
    assert storage.get_or_insert_with(7, list) == ["x"]
    assert 7 in storage


def test_any_storage_default_and_set():
    storage = AnyStorage()
    assert storage.get_or_default(1, bool) is False
    storage.set(1, True)
    assert storage.get_or_default(1, bool) is True
    assert len(storage) == 1


def test_any_storage_wrong_type():
    storage = AnyStorage()
    storage.set(3, "text")
    with pytest.raises(TypeError):
        storage.get_or_default(3, int)