import pytest

from dinorun.core.state import GameState
from dinorun.game import sprites
from dinorun.game.obstacles import ObstacleKind
from dinorun.game.spawner import Spawner

from conftest import ScriptedRandom

GROUND_Y = 210


def make_spawner(atlas, rng) -> Spawner:
    return Spawner(atlas=atlas, rng=rng, board_width=750, ground_y=GROUND_Y)


def test_nothing_spawns_at_low_score(atlas):
    rng = ScriptedRandom(randoms=[0.99] * 50)
    spawner = make_spawner(atlas, rng)
    for _ in range(50):
        assert spawner.maybe_spawn(GameState.PLAYING, 50) is None


def test_nothing_spawns_unless_playing(atlas):
    rng = ScriptedRandom(randoms=[0.99])
    spawner = make_spawner(atlas, rng)

    assert spawner.maybe_spawn(GameState.READY, 600) is None
    assert spawner.maybe_spawn(GameState.GAME_OVER, 600) is None
    # No draw was consumed
    assert rng.randoms == [0.99]


@pytest.mark.parametrize("draw, expected", [
    (0.9, sprites.GROUND_HAZARD_SMALL),
    (0.6, sprites.GROUND_HAZARD_MEDIUM),
    (0.4, sprites.GROUND_HAZARD_LARGE),
    (0.2, sprites.FLYING_HAZARD_1),
])
def test_all_branches_reachable_at_high_score(atlas, draw, expected):
    spawner = make_spawner(atlas, ScriptedRandom(randoms=[draw]))
    obstacle = spawner.maybe_spawn(GameState.PLAYING, 600)
    assert obstacle is not None
    assert obstacle.sprite == expected
    assert obstacle.x == 800


def test_low_draw_spawns_nothing(atlas):
    spawner = make_spawner(atlas, ScriptedRandom(randoms=[0.1]))
    assert spawner.maybe_spawn(GameState.PLAYING, 600) is None


def test_score_gates_larger_hazards(atlas):
    # Draw 0.6 only qualifies for medium, which needs score > 200
    spawner = make_spawner(atlas, ScriptedRandom(randoms=[0.6, 0.6]))
    assert spawner.maybe_spawn(GameState.PLAYING, 150) is None
    assert spawner.maybe_spawn(GameState.PLAYING, 201).sprite == sprites.GROUND_HAZARD_MEDIUM


def test_high_draw_prefers_small_hazard(atlas):
    spawner = make_spawner(atlas, ScriptedRandom(randoms=[0.95]))
    obstacle = spawner.maybe_spawn(GameState.PLAYING, 81)
    assert obstacle.sprite == sprites.GROUND_HAZARD_SMALL
    assert obstacle.hitbox.bottom == GROUND_Y


def test_flying_hazard_height_band(atlas):
    rng = ScriptedRandom(randoms=[0.2], ints=[39])
    spawner = make_spawner(atlas, rng)

    obstacle = spawner.maybe_spawn(GameState.PLAYING, 501)

    assert obstacle.kind == ObstacleKind.FLYING_HAZARD
    assert obstacle.y == GROUND_Y - atlas.height(sprites.FLYING_HAZARD_1) - 39
    assert obstacle.speed_bonus == 2.0
    assert rng.int_calls == [(0, 39)]


def test_select_rule_thresholds_are_strict(atlas):
    spawner = make_spawner(atlas, ScriptedRandom())
    assert spawner.select_rule(0.7, 600).sprite_name == sprites.GROUND_HAZARD_MEDIUM
    assert spawner.select_rule(0.71, 80) is None
