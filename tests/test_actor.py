from dinorun.core.state import GameState
from dinorun.game import sprites
from dinorun.game.actor import Actor

GROUND_Y = 210


def make_actor(atlas) -> Actor:
    return Actor(atlas, ground_y=GROUND_Y)


def test_starts_grounded(atlas):
    actor = make_actor(atlas)
    assert actor.is_grounded
    assert actor.resting_y == GROUND_Y - atlas.height(sprites.RUN_1)
    assert actor.hitbox.bottom == GROUND_Y


def test_jump_returns_exactly_to_resting_y(atlas):
    actor = make_actor(atlas)
    assert actor.jump()

    ticks = 0
    now = 0.0
    actor.update(GameState.PLAYING, now)
    while actor.is_airborne and ticks < 200:
        now += 20.0
        actor.update(GameState.PLAYING, now)
        ticks += 1

    assert ticks > 10
    assert actor.y == actor.resting_y
    assert actor.velocity_y == 0.0


def test_jump_reaches_a_peak_above_ground(atlas):
    actor = make_actor(atlas)
    actor.jump()
    lowest_y = actor.y
    for _ in range(30):
        actor.update(GameState.PLAYING, 0.0)
        lowest_y = min(lowest_y, actor.y)
    assert lowest_y < actor.resting_y - 100


def test_jump_while_airborne_is_ignored(atlas):
    actor = make_actor(atlas)
    actor.jump()
    actor.update(GameState.PLAYING, 0.0)
    velocity = actor.velocity_y

    assert not actor.jump()
    assert actor.velocity_y == velocity


def test_update_does_nothing_unless_playing(atlas):
    actor = make_actor(atlas)
    actor.jump()
    y = actor.y
    actor.update(GameState.READY, 0.0)
    actor.update(GameState.GAME_OVER, 0.0)
    assert actor.y == y


def test_duck_hitbox_is_shorter_and_stays_on_ground(atlas):
    actor = make_actor(atlas)
    standing = actor.hitbox

    actor.set_ducking(True)

    assert actor.hitbox.height < standing.height
    assert actor.hitbox.bottom == standing.bottom
    assert actor.current_sprite(GameState.PLAYING) == sprites.DUCK_1


def test_duck_while_airborne_has_no_effect(atlas):
    actor = make_actor(atlas)
    actor.jump()
    actor.update(GameState.PLAYING, 0.0)
    assert actor.is_airborne

    actor.set_ducking(True)

    assert not actor.is_ducking
    assert actor.current_sprite(GameState.PLAYING) == sprites.JUMP
    assert actor.hitbox.height == atlas.height(sprites.JUMP)


def test_standing_up_restores_hitbox(atlas):
    actor = make_actor(atlas)
    actor.set_ducking(True)
    actor.set_ducking(False)
    assert actor.hitbox.height == atlas.height(sprites.RUN_1)


def test_run_animation_alternates(atlas):
    actor = make_actor(atlas)
    assert actor.current_sprite(GameState.PLAYING) == sprites.RUN_1
    actor.update(GameState.PLAYING, 150.0)
    assert actor.current_sprite(GameState.PLAYING) == sprites.RUN_2


def test_dead_sprite_keeps_feet_on_ground(atlas):
    actor = make_actor(atlas)
    assert actor.current_sprite(GameState.GAME_OVER) == sprites.DEAD
    assert actor.sprite_y(GameState.GAME_OVER) + atlas.height(sprites.DEAD) == GROUND_Y


def test_snap_to_ground(atlas):
    actor = make_actor(atlas)
    actor.jump()
    actor.update(GameState.PLAYING, 0.0)

    actor.snap_to_ground()

    assert actor.is_grounded
    assert actor.velocity_y == 0.0
    assert not actor.is_ducking
