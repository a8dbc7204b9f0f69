import pytest

from gbtetris.assets import GAME_SCENE, TETRAMINO_GRAPHIC
from gbtetris.game_scene import (
    FALL_TIMER,
    FALL_TIMER_FRAC,
    LEFT_BORDER,
    PIECE_STEP,
    RIGHT_BORDER,
    START_X,
    START_Y,
    GameScene,
)
from gbtetris.graphics import (
    SCREEN_HEIGHT,
    SPRITE_X_OFFSET,
    SPRITE_Y_OFFSET,
    Display,
    decode_tiles,
)
from gbtetris.joypad import Button, Joypad

FALL_PERIOD = FALL_TIMER * FALL_TIMER_FRAC


@pytest.fixture
def display():
    return Display()


@pytest.fixture
def scene(display):
    return GameScene(display, 8)


def tap(scene, joypad, button):
    joypad.read(button)
    scene.update(joypad)
    joypad.read(0)
    scene.update(joypad)


def test_init_loads_background_map(display, scene):
    cells = [
        display.get_bkg_tile_xy(x, y)
        for y in range(GAME_SCENE.map_height)
        for x in range(GAME_SCENE.map_width)
    ]
    assert bytes(cells) == GAME_SCENE.tile_map


def test_init_loads_tiles_and_palettes(display, scene):
    expected = decode_tiles(GAME_SCENE.tiles)
    assert display.bkg_tiles[:len(expected)] == expected
    assert display.sprite_tiles[0] == decode_tiles(TETRAMINO_GRAPHIC.tiles)[0]
    assert display.sprite_palettes[0] == TETRAMINO_GRAPHIC.palettes


def test_init_resets_counters_and_position(display):
    display.scx = 5
    display.scy = 7
    scene = GameScene(display, 8)
    assert (scene.score, scene.level, scene.lines) == (0, 0, 0)
    assert (scene.piece_x, scene.piece_y) == (START_X, START_Y)
    assert (display.scx, display.scy) == (0, 0)
    assert not any(scene.collision_map)


def test_next_piece_depends_only_on_seed():
    first = GameScene(Display(), 3)
    second = GameScene(Display(), 3)
    assert first.next_piece == second.next_piece
    assert 0 <= first.next_piece <= 255


def test_right_moves_one_step(scene):
    joypad = Joypad()
    tap(scene, joypad, Button.RIGHT)
    assert scene.piece_x == START_X + PIECE_STEP


def test_right_stops_at_border(scene):
    joypad = Joypad()
    for _ in range(10):
        tap(scene, joypad, Button.RIGHT)
    assert scene.piece_x == RIGHT_BORDER - 24


def test_left_stops_at_border(scene):
    joypad = Joypad()
    for _ in range(10):
        tap(scene, joypad, Button.LEFT)
    assert scene.piece_x == LEFT_BORDER


def test_held_button_moves_only_once(scene):
    joypad = Joypad()
    joypad.read(Button.RIGHT)
    for _ in range(5):
        scene.update(joypad)
        joypad.read(Button.RIGHT)
    assert scene.piece_x == START_X + PIECE_STEP


def test_piece_falls_after_fall_period(scene):
    joypad = Joypad()
    for _ in range(FALL_PERIOD - 1):
        scene.update(joypad)
    assert scene.piece_y == START_Y
    scene.update(joypad)
    assert scene.piece_y == START_Y + PIECE_STEP
    assert scene.timer == FALL_TIMER


def test_holding_down_stops_fall(scene):
    joypad = Joypad()
    joypad.read(Button.DOWN)
    for _ in range(FALL_PERIOD * 3):
        scene.update(joypad)
    assert scene.piece_y == START_Y


def test_piece_stops_at_bottom(scene):
    joypad = Joypad()
    for _ in range(FALL_PERIOD * 40):
        scene.update(joypad)
    assert scene.piece_y == SCREEN_HEIGHT - 16


def test_up_resets_height_and_marks_collision(scene):
    joypad = Joypad()
    for _ in range(FALL_PERIOD * 2):
        scene.update(joypad)
    assert scene.piece_y > START_Y
    joypad.read(Button.UP)
    scene.update(joypad)
    assert scene.piece_y == 0
    assert scene.collision_map[0] == 1


def test_draw_ui_writes_single_digits(display, scene):
    scene.score = 3
    scene.level = 4
    scene.lines = 9
    scene.draw_ui(display)
    assert [display.get_bkg_tile_xy(19, row) for row in (1, 2, 3)] == [3, 4, 9]


def test_draw_ui_skips_large_values(display, scene):
    before = display.get_bkg_tile_xy(19, 1)
    scene.score = 12
    scene.draw_ui(display)
    assert display.get_bkg_tile_xy(19, 1) == before


def test_draw_ui_shows_collision_marker(display, scene):
    scene.draw_ui(display)
    assert display.get_bkg_tile_xy(1, 0) == GAME_SCENE.tile_map[1]
    scene.collision_map[0] = 1
    scene.draw_ui(display)
    assert display.get_bkg_tile_xy(1, 0) == 5


def test_draw_piece_places_j_shape(display, scene):
    scene.draw_piece(display)
    x = START_X + SPRITE_X_OFFSET
    y = START_Y + SPRITE_Y_OFFSET
    positions = [(s.x, s.y) for s in display.sprites[:4]]
    assert positions == [(x, y), (x, y + 8), (x + 8, y + 8), (x + 16, y + 8)]
    assert all(s.tile == 0 for s in display.sprites[:4])


def test_draw_piece_ignores_other_pieces(display, scene):
    scene.current_piece = 1
    scene.draw_piece(display)
    assert all((s.x, s.y) == (0, 0) for s in display.sprites[:4])