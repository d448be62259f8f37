import pytest

from alieninvasion.player import Move, PlayerShip, Rotation
from alieninvasion.world import World


@pytest.fixture
def world():
    return World()


def test_starts_near_bottom_centre(world):
    ship = PlayerShip(1.0, world)
    assert ship.position == (0.0, world.ymin + 2.0)
    assert ship.angle == 0.0


def test_move_right_then_left_round_trip(world):
    ship = PlayerShip(1.0, world)
    start = ship.position
    assert ship.move(Move.RIGHT) is True
    assert ship.x == pytest.approx(start[0] + ship.speed)
    assert ship.move(Move.LEFT) is True
    assert ship.position == pytest.approx(start)


def test_move_up_then_down_round_trip(world):
    ship = PlayerShip(2.0, world)
    start = ship.position
    assert ship.move(Move.UP)
    assert ship.y == pytest.approx(start[1] + 2.0)
    assert ship.move(Move.DOWN)
    assert ship.position == pytest.approx(start)


def test_accepts_plain_integers(world):
    ship = PlayerShip(1.0, world)
    assert ship.move(0) is True
    assert ship.x == pytest.approx(ship.speed)


def test_blocked_at_right_limit(world):
    ship = PlayerShip(1.0, world)
    ship.x = world.xmax
    assert ship.move(Move.RIGHT) is False
    assert ship.x == world.xmax


def test_blocked_at_bottom_limit(world):
    ship = PlayerShip(1.0, world)
    ship.y = world.ymin
    assert ship.move(Move.DOWN) is False
    assert ship.y == world.ymin


def test_repeated_moves_stop_near_the_edge(world):
    ship = PlayerShip(1.0, world)
    steps = 0
    while ship.move(Move.UP):
        steps += 1
        assert steps < 1000
    limit = world.ymax - world.player_size[1] * world.scale
    assert limit <= ship.y < limit + ship.speed


def test_invalid_direction_raises(world):
    ship = PlayerShip(1.0, world)
    with pytest.raises(ValueError):
        ship.move(7)


def test_invalid_rotation_raises(world):
    ship = PlayerShip(1.0, world)
    with pytest.raises(ValueError):
        ship.rotate(2)


def test_initial_heading_is_north(world):
    assert PlayerShip(1.0, world).heading() == 90.0


def test_counterclockwise_turns_west(world):
    ship = PlayerShip(1.0, world)
    assert ship.rotate(Rotation.COUNTERCLOCKWISE) is True
    assert ship.heading() == 180.0


def test_clockwise_from_start_wraps_to_east(world):
    ship = PlayerShip(1.0, world)
    assert ship.rotate(Rotation.CLOCKWISE) is True
    assert ship.angle == 270.0
    assert ship.heading() == 0.0


def test_four_turns_return_to_start(world):
    for rotation in Rotation:
        ship = PlayerShip(1.0, world)
        headings = set()
        for _ in range(4):
            ship.rotate(rotation)
            headings.add(ship.heading())
        assert ship.angle == 0.0
        assert headings == {0.0, 90.0, 180.0, 270.0}


def test_opposite_rotations_cancel(world):
    ship = PlayerShip(1.0, world)
    ship.rotate(Rotation.COUNTERCLOCKWISE)
    ship.rotate(Rotation.CLOCKWISE)
    assert ship.angle == 0.0