"""
Tests for per-tick creature behaviour.

Verifies:
- Player control (rest, move, burst, idle) and its health costs
- Boundary steering and position clamping
- Peer collision pushes fish apart
- Feeding and foraging
"""

import math

import numpy as np
import pytest

from fishbowl.creature import Creature, CreatureStatus
from fishbowl.controls import InputState
from fishbowl.food import FoodItem
from fishbowl.health import HealthResource
from fishbowl.peers import PeerView
from fishbowl.vector import Vector2
from fishbowl.errors import InvalidArgumentError, PreconditionFailedError


BOUNDS = (800.0, 600.0)


def make_fish(creature_id="fish-0000", x=400.0, y=300.0, vx=0.0, vy=0.0,
              player=False, width=60.0, health=50.0):
    return Creature(
        creature_id=creature_id,
        name=creature_id.split('-')[0].title(),
        position=Vector2(x, y),
        velocity=Vector2(vx, vy),
        width=width,
        height=30.0,
        is_player_controlled=player,
        input_state=InputState() if player else None,
        health=HealthResource(current=health),
    )


# ----------------------------------------------------------------------
# Construction
# ----------------------------------------------------------------------

def test_player_without_input_state_rejected():
    with pytest.raises(PreconditionFailedError):
        Creature(creature_id="p", name="P", position=Vector2(), velocity=Vector2(),
                 is_player_controlled=True)


def test_autonomous_with_input_state_rejected():
    with pytest.raises(PreconditionFailedError):
        Creature(creature_id="a", name="A", position=Vector2(), velocity=Vector2(),
                 input_state=InputState())


def test_defaults():
    fish = make_fish(vx=0.0, vy=1.0)
    assert fish.status is CreatureStatus.IDLE
    assert fish.health.current == 50.0
    assert fish.food_eaten == 0
    assert np.isclose(fish.orientation, math.pi / 2)


def test_negative_elapsed_rejected():
    fish = make_fish()
    with pytest.raises(InvalidArgumentError):
        fish.update(*BOUNDS, [fish], -0.1)


# ----------------------------------------------------------------------
# Player control
# ----------------------------------------------------------------------

def test_resting_stops_and_regenerates():
    fish = make_fish(vx=2.0, vy=2.0, player=True)
    fish.input_state.press('rest')

    fish.update(*BOUNDS, [fish], 1.0)

    assert fish.status is CreatureStatus.RESTING
    assert (fish.velocity.x, fish.velocity.y) == (0.0, 0.0)
    assert np.allclose(fish.position.as_array(), [400.0, 300.0])
    assert np.isclose(fish.health.current, 50.8)


def test_resting_regen_only_at_or_below_ceiling():
    fish = make_fish(player=True, health=80.0)
    fish.input_state.press('rest')

    fish.update(*BOUNDS, [fish], 1.0)

    assert fish.health.current == 80.0


def test_moving_costs_health():
    fish = make_fish(player=True)
    fish.input_state.press('right')

    fish.update(*BOUNDS, [fish], 1.0)

    assert fish.status is CreatureStatus.AWAKE
    assert np.allclose(fish.velocity.as_array(), [1.0, 0.0])
    assert np.isclose(fish.position.x, 401.0)
    assert np.isclose(fish.orientation, 0.0)
    assert np.isclose(fish.health.current, 49.75)


def test_burst_doubles_speed_and_costs_more():
    fish = make_fish(player=True)
    fish.input_state.press('right')
    fish.input_state.press('burst')

    fish.update(*BOUNDS, [fish], 1.0)

    assert fish.status is CreatureStatus.SPEEDING
    assert fish.status_label == "Speeding!"
    assert np.allclose(fish.velocity.as_array(), [2.0, 0.0])
    assert np.isclose(fish.position.x, 402.0)
    assert np.isclose(fish.health.current, 48.75)


def test_idle_player_pays_upkeep():
    fish = make_fish(vx=1.0, player=True)

    fish.update(*BOUNDS, [fish], 1.0)

    assert fish.status is CreatureStatus.AWAKE
    assert (fish.velocity.x, fish.velocity.y) == (0.0, 0.0)
    assert np.isclose(fish.health.current, 49.99)


def test_zero_elapsed_movement_is_free():
    fish = make_fish(player=True)
    fish.input_state.press('down')

    fish.update(*BOUNDS, [fish], 0.0)

    assert fish.health.current == 50.0
    assert np.isclose(fish.position.y, 301.0)


def test_health_never_negative_while_bursting():
    fish = make_fish(player=True, health=0.5)
    fish.input_state.press('up')
    fish.input_state.press('burst')

    for _ in range(5):
        fish.update(*BOUNDS, [fish], 1.0)

    assert fish.health.current == 0.0
    assert fish.status is CreatureStatus.SPEEDING


# ----------------------------------------------------------------------
# Boundary steering
# ----------------------------------------------------------------------

def test_left_wall_pushes_inward():
    fish = make_fish(x=10.0, y=300.0)

    fish.update(*BOUNDS, [fish], 0.1)

    assert fish.velocity.x > 0
    assert np.isclose(fish.velocity.magnitude(), fish.max_speed)
    assert fish.position.x >= fish.width / 2


def test_fish_turns_back_from_right_wall():
    fish = make_fish(x=790.0, y=300.0, vx=1.0)

    for _ in range(30):
        fish.update(*BOUNDS, [fish], 0.1)
        assert fish.width / 2 <= fish.position.x <= BOUNDS[0] - fish.width / 2

    assert fish.velocity.x < 0


def test_position_clamped_inside_tank():
    fish = make_fish(x=-20.0, y=700.0)

    fish.update(*BOUNDS, [fish], 0.1)

    assert fish.position.x == 30.0
    assert fish.position.y == 585.0


def test_no_steering_in_open_water():
    fish = make_fish(vx=0.5, vy=0.25)

    fish.update(*BOUNDS, [fish], 0.1)

    assert np.allclose(fish.velocity.as_array(), [0.5, 0.25])
    assert np.allclose(fish.position.as_array(), [400.5, 300.25])


# ----------------------------------------------------------------------
# Peer collision
# ----------------------------------------------------------------------

def test_overlapping_fish_push_apart():
    a = make_fish("a-0000", x=400.0)
    b = make_fish("b-0001", x=420.0)
    peers = PeerView.from_creatures([a, b])

    a.update(*BOUNDS, peers, 0.1)
    b.update(*BOUNDS, peers, 0.1)

    assert a.velocity.x < 0
    assert b.velocity.x > 0
    assert np.isclose(a.velocity.magnitude(), a.max_speed)
    assert np.isclose(a.orientation, math.pi)


def test_separation_grows_over_ticks():
    a = make_fish("a-0000", x=400.0)
    b = make_fish("b-0001", x=420.0)
    distance = a.position.distance_to(b.position)

    for _ in range(10):
        peers = PeerView.from_creatures([a, b])
        a.update(*BOUNDS, peers, 0.1)
        b.update(*BOUNDS, peers, 0.1)
        new_distance = a.position.distance_to(b.position)
        assert new_distance >= distance
        distance = new_distance

    assert distance > 20.0


def test_self_is_not_a_collision():
    fish = make_fish(vx=0.5)

    fish.update(*BOUNDS, [fish], 0.1)

    assert np.allclose(fish.velocity.as_array(), [0.5, 0.0])


def test_shared_id_is_not_mistaken_for_self():
    """Self is found by identity in a creature list, not by id"""
    a = make_fish("twin", x=200.0, vx=0.5)
    b = make_fish("twin", x=600.0, vx=-0.5)

    a.update(*BOUNDS, [a, b], 0.1)
    b.update(*BOUNDS, [a, b], 0.1)

    assert np.allclose(a.velocity.as_array(), [0.5, 0.0])
    assert np.allclose(b.velocity.as_array(), [-0.5, 0.0])


def test_overlapping_fish_with_shared_id_push_apart():
    a = make_fish("twin", x=400.0)
    b = make_fish("twin", x=420.0)
    peers = PeerView.from_creatures([a, b])

    a.update(*BOUNDS, peers, 0.1, self_row=0)
    b.update(*BOUNDS, peers, 0.1, self_row=1)

    assert a.velocity.x < 0
    assert b.velocity.x > 0


def test_coincident_fish_do_not_fail():
    a = make_fish("a-0000")
    b = make_fish("b-0001")

    a.update(*BOUNDS, [a, b], 0.1)

    assert np.all(np.isfinite(a.velocity.as_array()))
    assert np.isclose(a.velocity.magnitude(), a.max_speed)


# ----------------------------------------------------------------------
# Feeding
# ----------------------------------------------------------------------

def test_is_near_food_eats_on_hit():
    fish = make_fish(x=0.0, y=0.0)
    food = FoodItem(position=Vector2(25.0, 0.0), radius=5.0)

    assert fish.is_near_food(food)
    assert fish.food_eaten == 1
    assert fish.health.current == 51.0

    assert fish.is_near_food(food)
    assert fish.food_eaten == 2


def test_is_near_food_miss_has_no_effect():
    fish = make_fish(x=0.0, y=0.0)
    food = FoodItem(position=Vector2(35.0, 0.0), radius=5.0)

    assert not fish.is_near_food(food)
    assert fish.food_eaten == 0
    assert fish.health.current == 50.0


def test_move_towards_nearest_food():
    fish = make_fish(x=100.0, y=100.0)
    food = [FoodItem(position=Vector2(200.0, 100.0)), FoodItem(position=Vector2(100.0, 150.0))]

    fish.move_towards_food(food)

    assert np.allclose(fish.velocity.as_array(), [0.0, 0.1])
    assert np.isclose(fish.orientation, math.pi / 2)


def test_move_towards_food_tie_goes_to_first():
    fish = make_fish(x=100.0, y=100.0)
    food = [FoodItem(position=Vector2(110.0, 100.0)), FoodItem(position=Vector2(90.0, 100.0))]

    fish.move_towards_food(food)

    assert np.allclose(fish.velocity.as_array(), [0.1, 0.0])


def test_move_towards_food_respects_max_speed():
    fish = make_fish(x=100.0, y=100.0, vx=1.0)

    fish.move_towards_food([FoodItem(position=Vector2(100.0, 200.0))])

    assert np.isclose(fish.velocity.magnitude(), 1.0)
    assert fish.velocity.y > 0


def test_move_towards_no_food_is_noop():
    fish = make_fish(vx=0.3)
    fish.move_towards_food([])
    assert np.allclose(fish.velocity.as_array(), [0.3, 0.0])


# ----------------------------------------------------------------------
# Queries
# ----------------------------------------------------------------------

def test_contains_point():
    fish = make_fish(x=100.0, y=100.0)
    assert fish.contains_point(130.0, 100.0)
    assert not fish.contains_point(131.0, 100.0)


def test_describe_and_serialization():
    fish = make_fish("xiao-0000", player=True)
    fish.gender = "Male"
    fish.input_state.press('left')

    assert fish.describe() == "Color: blue, Size: 60x30, Name: Xiao, Gender: Male, food eaten: 0"

    data = fish.to_dict()
    assert data['status'] == "Idle"
    assert data['status_label'] == ""
    assert data['input']['left'] is True

    clone = Creature.from_dict(data)
    assert clone.creature_id == fish.creature_id
    assert clone.is_player_controlled
    assert clone.input_state.left
    assert np.allclose(clone.position.as_array(), fish.position.as_array())
    assert clone.health.current == fish.health.current
