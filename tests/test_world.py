import pytest

from alieninvasion.world import World


def test_default_bounds_are_symmetric_around_origin():
    world = World()
    assert world.bounds == (-world.size, world.size, -world.size, world.size)
    assert world.width == 2 * world.size
    assert world.height == 2 * world.size


def test_default_size_matches_source():
    world = World()
    assert world.size == 20.0
    assert world.player_size == (6.0, 5.0)
    assert world.enemy_size == (3.0, 2.0)
    assert world.scale == 0.25


def test_projectile_size_is_half_scaled_player_width():
    world = World(player_size=(8.0, 5.0), scale=0.5)
    assert world.projectile_size == pytest.approx(2.0)


def test_contains_includes_edges():
    world = World(size=10.0)
    assert world.contains(world.xmin, world.ymin)
    assert world.contains(world.xmax, world.ymax)
    assert world.contains(0.0, 0.0)


def test_contains_rejects_points_outside():
    world = World(size=10.0)
    assert not world.contains(world.xmax + 0.01, 0.0)
    assert not world.contains(0.0, world.ymin - 0.01)
    assert not world.contains(world.xmin - 1.0, world.ymax + 1.0)


@pytest.mark.parametrize("kwargs", [{"size": 0.0}, {"size": -3.0}, {"scale": 0.0}])
def test_invalid_world_is_rejected(kwargs):
    with pytest.raises(ValueError):
        World(**kwargs)