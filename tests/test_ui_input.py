from quadgfx.canvas import Vec2
from quadgfx.ui_input import Input, InputCharacter, KeyCode, MemoryClipboard


def test_reset_clears_frame_events_but_keeps_held_state():
    state = Input()
    state.is_mouse_down = True
    state.click_down = True
    state.click_up = True
    state.escape = True
    state.enter = True
    state.mouse_position = Vec2(4.0, 5.0)
    state.mouse_wheel = Vec2(0.0, 1.0)
    state.input_buffer.append(InputCharacter("a"))
    state.reset()
    assert state.click_down is False
    assert state.click_up is False
    assert state.escape is False
    assert state.enter is False
    assert state.input_buffer == []
    assert state.mouse_wheel == Vec2()
    assert state.is_mouse_down is True
    assert state.mouse_position == Vec2(4.0, 5.0)


def test_input_character_kinds():
    typed = InputCharacter("q", modifier_shift=True)
    pressed = InputCharacter(KeyCode.TAB, modifier_ctrl=True)
    assert typed.is_char is True
    assert pressed.is_char is False
    assert pressed.key is KeyCode.TAB
    assert typed.modifier_shift and not typed.modifier_ctrl


def test_inputs_have_separate_buffers():
    first = Input()
    second = Input()
    first.input_buffer.append(InputCharacter(KeyCode.ENTER))
    assert second.input_buffer == []


def test_clipboard_round_trip():
    clipboard = MemoryClipboard()
    assert clipboard.get() is None
    clipboard.set("copied text")
    assert clipboard.get() == "copied text"
    clipboard.set("")
    assert clipboard.get() == ""