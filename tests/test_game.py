import pytest

from minibill.game import (
    BALL_COUNT,
    BALL_POSITIONS,
    BALL_RADIUS,
    POCKET_POSITIONS,
    TABLE_HEIGHT,
    TABLE_WIDTH,
    TARGET_FPS,
    Game,
    Table,
)
from minibill.scene import Scene
from minibill.vector import Vector2


@pytest.fixture
def game():
    g = Game(Scene())
    g.init()
    return g


def _positions(table):
    return [(p.x, p.y) for p in table.positions]


def test_init_creates_all_meshes(game):
    assert len(game.scene.meshes) == 13
    assert _positions(game.table) == list(BALL_POSITIONS)
    assert game.table.is_pocketed == [False] * BALL_COUNT


def test_init_sets_background_and_fps():
    seen = []
    scene = Scene()
    g = Game(scene, set_target_fps=seen.append)
    g.init()
    assert seen == [TARGET_FPS]
    assert (scene.background_width, scene.background_height) == (
        TABLE_WIDTH,
        TABLE_HEIGHT,
    )


def test_table_init_twice_raises(game):
    with pytest.raises(RuntimeError):
        game.table.init(game.scene)


def test_table_deinit_without_init_raises():
    with pytest.raises(RuntimeError):
        Table().deinit(Scene())


def test_deinit_clears_scene(game):
    game.table.speed_modulus[2] = 3.0
    game.deinit()
    assert game.scene.meshes == []
    assert game.table.speed_sum() == 0.0
    assert game.table.balls == [None] * BALL_COUNT


def test_speed_sum(game):
    game.table.speed_modulus[0] = 1.5
    game.table.speed_modulus[4] = 2.5
    assert game.table.speed_sum() == pytest.approx(4.0)


def test_is_in_pocket(game):
    assert not game.is_in_pocket(0)
    game.table.positions[0] = Vector2(*POCKET_POSITIONS[4])
    assert game.is_in_pocket(0)


def test_check_borders_bottom(game):
    game.table.positions[1] = Vector2(0.0, -10.0)
    game.table.speed_direction[1] = Vector2(0.0, -1.0)
    game.table.speed_modulus[1] = 1.0
    game.check_borders(1)
    assert game.table.positions[1].y == pytest.approx(-0.5 * TABLE_HEIGHT + BALL_RADIUS)
    assert game.table.speed_direction[1].y == pytest.approx(1.0)
    assert 0.0 < game.table.speed_modulus[1] < 1.0


def test_check_borders_right(game):
    game.table.positions[1] = Vector2(10.0, 0.0)
    game.table.speed_direction[1] = Vector2(1.0, 0.0)
    game.table.speed_modulus[1] = 2.0
    game.check_borders(1)
    assert game.table.positions[1].x == pytest.approx(0.5 * TABLE_WIDTH - BALL_RADIUS)
    assert game.table.speed_direction[1].x == pytest.approx(-1.0)
    assert game.table.speed_modulus[1] < 2.0


def test_check_borders_inside_untouched(game):
    before = _positions(game.table)
    game.check_borders(3)
    assert _positions(game.table) == before


def test_head_on_collision(game):
    table = game.table
    table.positions[1] = Vector2(0.0, -2.0)
    table.positions[2] = Vector2(0.5, -2.0)
    table.speed_direction[1] = Vector2(1.0, 0.0)
    table.speed_modulus[1] = 1.0
    game.check_ball_collision(1)

    gap = Vector2(
        table.positions[2].x - table.positions[1].x,
        table.positions[2].y - table.positions[1].y,
    )
    assert gap.length() == pytest.approx(2 * BALL_RADIUS)
    assert table.speed_direction[2].x == pytest.approx(1.0)
    assert table.speed_modulus[2] > table.speed_modulus[1] > 0.0
    assert table.speed_sum() < 1.0


def test_move_ball_advances(game):
    table = game.table
    table.speed_direction[0] = Vector2(0.0, 1.0)
    table.speed_modulus[0] = 2.0
    start_x = table.positions[0].x
    game.move_ball(0, 0.1)
    assert table.positions[0].y == pytest.approx(0.2)
    assert table.positions[0].x == pytest.approx(start_x)
    assert table.balls[0].position_y == pytest.approx(table.positions[0].y)
    assert 0.0 < table.speed_modulus[0] < 2.0


def test_move_ball_speed_never_negative(game):
    game.table.speed_direction[0] = Vector2(1.0, 0.0)
    game.table.speed_modulus[0] = 0.01
    game.move_ball(0, 1.0)
    assert game.table.speed_modulus[0] == 0.0


def test_object_ball_pocketed(game):
    table = game.table
    table.positions[3] = Vector2(*POCKET_POSITIONS[0])
    table.speed_modulus[3] = 1.0
    game.move_ball(3, 0.01)
    assert table.is_pocketed[3]
    assert table.balls[3] is None
    assert table.speed_modulus[3] == 0.0
    assert len(game.scene.meshes) == 12


def test_cue_ball_pocketed_resets(game):
    table = game.table
    table.positions[5] = Vector2(*POCKET_POSITIONS[1])
    game.move_ball(5, 0.01)
    table.positions[0] = Vector2(*POCKET_POSITIONS[2])
    game.move_ball(0, 0.01)
    assert _positions(game.table) == list(BALL_POSITIONS)
    assert game.table.is_pocketed == [False] * BALL_COUNT
    assert len(game.scene.meshes) == 13


def test_charging_progress(game):
    game.mouse_button_pressed(0.0, 0.0)
    assert game.is_charging_shot
    game.update(0.25)
    assert game.shot_charge_progress == pytest.approx(0.25)
    assert game.scene.progress == pytest.approx(0.25)
    game.update(5.0)
    assert game.shot_charge_progress == 1.0


def test_release_shoots_cue_ball(game):
    game.mouse_button_pressed(0.0, 0.0)
    game.update(0.5)
    game.mouse_button_released(0.0, 3.0)
    table = game.table
    assert game.is_balls_moving
    assert not game.is_charging_shot
    assert game.shot_charge_progress == 0.0
    assert table.speed_modulus[0] == pytest.approx(0.5 * TABLE_WIDTH)
    assert table.speed_direction[0].length() == pytest.approx(1.0)
    assert table.speed_direction[0].x > 0 and table.speed_direction[0].y > 0


def test_press_ignored_while_moving(game):
    game.is_balls_moving = True
    game.mouse_button_pressed(0.0, 0.0)
    assert not game.is_charging_shot
    game.mouse_button_released(1.0, 1.0)
    assert game.table.speed_modulus[0] == 0.0


def test_motion_stops_when_all_still(game):
    game.mouse_button_released(0.0, 0.0)
    assert game.is_balls_moving
    game.update(0.01)
    assert not game.is_balls_moving