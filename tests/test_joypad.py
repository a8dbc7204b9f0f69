from gbtetris.joypad import Button, Joypad


def test_fresh_joypad_reports_nothing_pressed():
    pad = Joypad()
    assert not any(pad.pressed(button) for button in Button)
    assert not any(pad.just_pressed(button) for button in Button)


def test_read_shifts_state():
    pad = Joypad()
    pad.read(Button.START)
    pad.read(Button.A | Button.B)
    assert pad.previous == Button.START
    assert pad.current == Button.A | Button.B


def test_pressed_follows_current_state():
    pad = Joypad()
    pad.read(Button.LEFT | Button.DOWN)
    assert pad.pressed(Button.LEFT)
    assert pad.pressed(Button.DOWN)
    assert not pad.pressed(Button.RIGHT)


def test_just_pressed_only_on_first_frame():
    pad = Joypad()
    pad.read(Button.START)
    assert pad.just_pressed(Button.START) is True
    pad.read(Button.START)
    assert pad.just_pressed(Button.START) is False
    assert pad.pressed(Button.START) is True


def test_just_pressed_again_after_release():
    pad = Joypad()
    pad.read(Button.UP)
    pad.read(0)
    assert pad.just_pressed(Button.UP) is False
    pad.read(Button.UP)
    assert pad.just_pressed(Button.UP) is True


def test_other_button_held_does_not_block_edge():
    pad = Joypad()
    pad.read(Button.DOWN)
    pad.read(Button.DOWN | Button.RIGHT)
    assert pad.just_pressed(Button.RIGHT) is True
    assert pad.just_pressed(Button.DOWN) is False


def test_read_keeps_only_eight_bits():
    pad = Joypad()
    pad.read(0x100 | Button.A)
    assert pad.current == Button.A