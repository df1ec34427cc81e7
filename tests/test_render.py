import pytest

from raycub.player import HEIGHT, WIDTH, Player
from raycub.render import (
    Frame,
    cast_ray,
    draw_background,
    draw_column,
    draw_minimap,
    draw_walls,
    render,
)
from raycub.scene import Scene, build_grid
from raycub.xpm import Image

NORTH, EAST, WEST, SOUTH = 0x110000, 0x002200, 0x000033, 0x444444


def _texture(color):
    return Image(64, 64, (color,) * 4096)


TEXTURES = tuple(_texture(c) for c in (NORTH, EAST, WEST, SOUTH))


def _box():
    grid, _, _ = build_grid(["11111", "10001", "10001", "10001", "11111"])
    return grid


def test_default_frame_matches_window():
    frame = Frame()
    assert (frame.width, frame.height) == (WIDTH, HEIGHT)
    assert len(frame.pixels) == WIDTH * HEIGHT


def test_put_get_round_trip():
    frame = Frame(4, 3)
    frame.put(3, 2, 0xABCDEF)
    assert frame.get(3, 2) == 0xABCDEF
    assert frame.get(0, 0) == 0


def test_put_masks_to_32_bits():
    frame = Frame(2, 2)
    frame.put(1, 1, -1)
    assert frame.get(1, 1) == 0xFFFFFFFF


@pytest.mark.parametrize("x, y", [(-1, 0), (4, 0), (0, 3), (0, -1)])
def test_out_of_bounds_raises(x, y):
    frame = Frame(4, 3)
    with pytest.raises(IndexError):
        frame.put(x, y, 1)
    with pytest.raises(IndexError):
        frame.get(x, y)


def test_to_bytes_is_packed_rgb():
    frame = Frame(2, 2)
    frame.put(0, 0, 0x112233)
    frame.put(1, 1, 0xAABBCC)
    data = frame.to_bytes()
    assert len(data) == 2 * 2 * 3
    assert data[:3] == b"\x11\x22\x33"
    assert data[-3:] == b"\xaa\xbb\xcc"


def test_draw_background_splits_halves():
    frame = Frame(5, 4)
    draw_background(frame, 0x0000FF, 0x00FF00)
    for x in range(5):
        assert [frame.get(x, y) for y in range(4)] == [0x0000FF, 0x0000FF, 0x00FF00, 0x00FF00]


def test_cast_ray_hits_wall_in_front():
    player = Player(pos_x=2.5, pos_y=2.5)
    grid = _box()
    hit = cast_ray(player, grid, 1, 2)
    assert grid[hit.map_x][hit.map_y] == "1"
    assert hit.side == 0
    assert hit.map_y == int(player.pos_y)
    assert hit.per_dist == pytest.approx(1.5)


def test_cast_ray_symmetric_in_box():
    grid = _box()
    back = cast_ray(Player(pos_x=2.5, pos_y=2.5), grid, 1, 2)
    front = cast_ray(Player(pos_x=2.5, pos_y=2.5, dir_x=1.0, plane_y=-0.66), grid, 1, 2)
    assert front.per_dist == pytest.approx(back.per_dist)
    assert front.step_x == -back.step_x


@pytest.mark.parametrize(
    "dir_x, dir_y, color",
    [
        (-1.0, 0.0, NORTH),
        (1.0, 0.0, SOUTH),
        (0.0, 1.0, EAST),
        (0.0, -1.0, WEST),
    ],
)
def test_draw_column_picks_texture_by_side(dir_x, dir_y, color):
    player = Player(pos_x=2.5, pos_y=2.5, dir_x=dir_x, dir_y=dir_y, plane_x=0.0, plane_y=0.0)
    hit = cast_ray(player, _box(), 1, 2)
    frame = Frame(3, 40)
    draw_column(frame, 1, hit, player, TEXTURES)
    assert frame.get(1, 20) == color
    assert frame.get(1, 0) == 0
    assert frame.get(0, 20) == 0


def test_draw_column_clamps_close_wall():
    player = Player(pos_x=1.5, pos_y=2.5)
    hit = cast_ray(player, _box(), 1, 2)
    frame = Frame(3, 40)
    draw_column(frame, 1, hit, player, TEXTURES)
    assert all(frame.get(1, y) == NORTH for y in range(39))
    assert frame.get(1, 39) == 0


def test_draw_walls_covers_every_column():
    frame = Frame(16, 20)
    textures = (_texture(0x123456),) * 4
    draw_background(frame, 0x0000FF, 0x00FF00)
    draw_walls(frame, Player(pos_x=2.5, pos_y=2.5), _box(), textures)
    assert all(frame.get(x, 10) == 0x123456 for x in range(16))
    assert all(frame.get(x, 19) == 0x00FF00 for x in range(16))


def test_draw_minimap_colours_cells():
    frame = Frame(40, 40)
    draw_background(frame, 0x0000FF, 0x00FF00)
    draw_minimap(frame, Player(pos_x=2.5, pos_y=2.5), _box(), 5, 5)
    assert frame.get(14, 14) == 0xFF0000
    assert frame.get(20, 20) == 0xFF0000
    assert frame.get(7, 7) == 0xFFFFFF
    assert frame.get(0, 0) == 0x000000
    assert frame.get(39, 39) == 0x00FF00


def test_draw_minimap_clips_to_frame():
    frame = Frame(10, 10)
    draw_minimap(frame, Player(pos_x=2.5, pos_y=2.5), _box(), 5, 5)
    assert frame.get(9, 9) == 0xFFFFFF


def test_render_with_and_without_minimap():
    grid, width, height = build_grid(["11111", "10001", "10001", "10001", "11111"])
    scene = Scene(
        textures=TEXTURES,
        floor=0x00FF00,
        ceiling=0x0000FF,
        grid=grid,
        width=width,
        height=height,
    )
    plain = render(Frame(40, 40), scene, Player(pos_x=2.5, pos_y=2.5))
    assert plain.get(0, 39) == 0x00FF00
    assert plain.get(14, 14) != 0xFF0000
    with_map = render(Frame(40, 40), scene, Player(pos_x=2.5, pos_y=2.5), minimap=True)
    assert with_map.get(14, 14) == 0xFF0000
    assert with_map.get(0, 39) == 0x00FF00