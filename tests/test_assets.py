import dataclasses

import pytest

from gbtetris.assets import GAME_SCENE, TETRAMINO_GRAPHIC, Asset
from gbtetris.graphics import ATTR_PALETTE, Display, decode_tile, decode_tiles, rgb8


def _loaded_display():
    display = Display()
    display.set_bkg_palette(0, GAME_SCENE.palettes)
    display.set_bkg_data(0, GAME_SCENE.tiles)
    display.set_bkg_tiles(0, 0, GAME_SCENE.map_width, GAME_SCENE.map_height, GAME_SCENE.tile_map)
    display.set_bkg_attributes(
        0, 0, GAME_SCENE.map_width, GAME_SCENE.map_height, GAME_SCENE.map_attributes
    )
    return display


def test_tetramino_counts_match_header():
    assert TETRAMINO_GRAPHIC.tile_count() == 1
    assert TETRAMINO_GRAPHIC.palette_count() == 1
    assert TETRAMINO_GRAPHIC.total_colors == 4
    assert (TETRAMINO_GRAPHIC.width, TETRAMINO_GRAPHIC.height) == (8, 8)


def test_tetramino_palette_colours():
    assert TETRAMINO_GRAPHIC.palettes == (
        rgb8(255, 255, 255), rgb8(255, 79, 114), rgb8(0, 0, 0), rgb8(0, 0, 0),
    )


def test_tetramino_tile_has_solid_border():
    tile = decode_tile(TETRAMINO_GRAPHIC.tiles)
    assert tile[0] == (1,) * 8
    assert tile[7] == (1,) * 8
    assert all(row[0] == 1 and row[7] == 1 for row in tile)


def test_game_scene_counts_match_header():
    assert GAME_SCENE.tile_count() == 85
    assert GAME_SCENE.palette_count() == 8
    assert GAME_SCENE.total_colors == 32
    assert len(GAME_SCENE.tiles) == 1360


def test_game_scene_map_dimensions():
    assert GAME_SCENE.map_width == 20
    assert GAME_SCENE.map_height == 18
    assert len(GAME_SCENE.tile_map) == 360
    assert len(GAME_SCENE.map_attributes) == 360
    display = _loaded_display()
    assert display.get_bkg_tile_xy(19, 17) == GAME_SCENE.tile_map[359]


def test_game_scene_first_palette():
    assert GAME_SCENE.palettes[:4] == (
        rgb8(255, 255, 255), rgb8(255, 218, 67), rgb8(255, 79, 114), rgb8(0, 0, 0),
    )


def test_game_scene_map_references_existing_tiles():
    assert max(GAME_SCENE.tile_map) < GAME_SCENE.tile_count()


def test_game_scene_attributes_reference_existing_palettes():
    assert all(
        (attr & ATTR_PALETTE) < GAME_SCENE.palette_count()
        for attr in GAME_SCENE.map_attributes
    )


def test_game_scene_playfield_walls():
    display = _loaded_display()
    for y in range(GAME_SCENE.map_height):
        assert display.get_bkg_tile_xy(0, y) == 0x0B
        assert display.get_bkg_tile_xy(11, y) == 0x0B
        assert {display.get_bkg_tile_xy(x, y) for x in range(1, 11)} == {0x0A}


def test_game_scene_last_map_row():
    display = _loaded_display()
    last_row = bytes(display.get_bkg_tile_xy(x, 17) for x in range(12, 20))
    assert last_row == bytes((0x0A, 0x0A, 0x0A, 0x51, 0x52, 0x53, 0x54, 0x0A))


def test_game_scene_tiles_decode_whole():
    tiles = decode_tiles(GAME_SCENE.tiles)
    assert len(tiles) == GAME_SCENE.tile_count()
    assert tiles[16] == tuple((0,) * 8 for _ in range(8))


def test_game_scene_loads_into_display():
    display = _loaded_display()
    assert display.get_bkg_tile_xy(0, 0) == GAME_SCENE.tile_map[0]
    assert display.get_bkg_tile_xy(12, 1) == GAME_SCENE.tile_map[32]
    assert display.bkg_palettes[7] == GAME_SCENE.palettes[28:32]


def test_asset_rejects_partial_tile():
    with pytest.raises(ValueError):
        Asset(name="bad", width=8, height=8, tiles=bytes(15), palettes=(0, 0, 0, 0))


def test_asset_rejects_partial_palette():
    with pytest.raises(ValueError):
        Asset(name="bad", width=8, height=8, tiles=bytes(16), palettes=(0, 0, 0))


def test_asset_rejects_wrong_map_size():
    with pytest.raises(ValueError):
        Asset(
            name="bad", width=16, height=8, tiles=bytes(16),
            palettes=(0, 0, 0, 0), tile_map=bytes(3),
        )


def test_asset_counts_for_custom_data():
    asset = Asset(
        name="pair", width=16, height=8, tiles=bytes(32),
        palettes=(0,) * 8, tile_map=bytes(2), map_attributes=bytes(2),
    )
    assert asset.tile_count() == 2
    assert asset.palette_count() == 2


def test_asset_is_immutable():
    asset = Asset(name="single", width=8, height=8, tiles=bytes(16), palettes=(0, 0, 0, 0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        asset.width = 16
    assert asset.width == 8