import math

import numpy as np
import pytest

from asteroids.config import GameConfig, GunConfig, ShipConfig
from asteroids.controls import IDLE, InputSnapshot
from asteroids.sim.ship import ShipController, new_ship
from asteroids.sim.world import Bounds


def test_new_ship_centered_facing_up(config, bounds):
    ship = new_ship(bounds, config)
    np.testing.assert_allclose(ship.pos, [400.0, 300.0])
    np.testing.assert_allclose(ship.vel, [0.0, 0.0])
    assert ship.r == 10.0
    assert ship.a == pytest.approx(math.pi / 2)
    assert ship.can_shoot


@pytest.mark.parametrize(
    ("controls", "sign"),
    [
        (InputSnapshot(turn_left=True), 1),
        (InputSnapshot(turn_right=True), -1),
        (InputSnapshot(turn_left=True, turn_right=True), 0),
        (IDLE, 0),
        (InputSnapshot(turn_left=True, thrust=True), 1),
    ],
)
def test_rotation(config, bounds, make_ship, controls, sign):
    ctrl = ShipController(config)
    ship = make_ship(a=1.0)
    out = ctrl.advance(ship, controls, bounds)
    k = 2 * math.pi / 60
    assert out.rot == pytest.approx(sign * k)
    assert out.a == pytest.approx(1.0 + sign * k)


def test_heading_is_not_normalized(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(a=0.0)
    for _ in range(120):  # two full turns
        ship = ctrl.advance(ship, InputSnapshot(turn_left=True), bounds)
    assert ship.a == pytest.approx(4 * math.pi)


def test_thrust_accelerates_along_heading(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(a=math.pi / 2)
    out = ctrl.advance(ship, InputSnapshot(thrust=True), bounds)

    dv = 5.0 / 60.0
    assert out.thrusting
    assert out.vel[0] == pytest.approx(0.0, abs=1e-12)
    assert out.vel[1] == pytest.approx(-dv)  # screen up
    assert out.pos[1] == pytest.approx(300.0 - dv)


def test_thrust_uses_heading_before_turn(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(a=0.0)
    out = ctrl.advance(ship, InputSnapshot(thrust=True, turn_left=True), bounds)
    assert out.vel[0] == pytest.approx(5.0 / 60.0)
    assert out.vel[1] == pytest.approx(0.0)


def test_friction_decays_without_sign_flip(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(vel=(3.0, -2.0))
    prev = ship.speed
    for _ in range(600):
        ship = ctrl.advance(ship, IDLE, bounds)
        assert not ship.thrusting
        assert ship.speed < prev
        assert ship.vel[0] > 0.0
        assert ship.vel[1] < 0.0
        prev = ship.speed
    # Geometric: (1 - 0.7/60) ** 600
    assert ship.vel[0] == pytest.approx(3.0 * (1 - 0.7 / 60) ** 600)


def test_position_integrates_velocity(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(vel=(6.0, 0.0))
    out = ctrl.advance(ship, InputSnapshot(thrust=True, turn_left=True), bounds)
    # Thrust is applied to velocity before the move.
    assert out.pos[0] == pytest.approx(400.0 + out.vel[0])


@pytest.mark.parametrize(
    ("start", "expected"),
    [
        ((-10.5, 300.0), (809.5, 300.0)),
        ((810.5, 300.0), (-9.5, 300.0)),
        ((400.0, -12.0), (400.0, 608.0)),
        ((400.0, 611.0), (400.0, -9.0)),
        ((-10.0, 300.0), (-10.0, 300.0)),  # exactly on the margin: no wrap
        ((-11.0, -11.0), (809.0, 609.0)),
    ],
)
def test_margin_wrap_carries_position(config, bounds, make_ship, start, expected):
    ctrl = ShipController(config)
    out = ctrl.advance(make_ship(pos=start), IDLE, bounds)
    np.testing.assert_allclose(out.pos, expected)
    assert out.wrapped == (start != expected)


def test_wrap_after_bounds_shrink(config, make_ship):
    ctrl = ShipController(config)
    small = Bounds(200.0, 100.0)
    out = ctrl.advance(make_ship(pos=(700.0, 550.0)), IDLE, small)
    assert -out.r <= out.pos[0] <= small.width + out.r
    assert -out.r <= out.pos[1] <= small.height + out.r


def test_advance_does_not_mutate_input(config, bounds, make_ship):
    ctrl = ShipController(config)
    ship = make_ship(vel=(1.0, 1.0))
    ctrl.advance(ship, InputSnapshot(thrust=True, turn_left=True, fire=True), bounds)
    np.testing.assert_allclose(ship.pos, [400.0, 300.0])
    np.testing.assert_allclose(ship.vel, [1.0, 1.0])
    assert ship.a == pytest.approx(math.pi / 2)
    assert ship.can_shoot


class TestCooldown:
    def test_fire_requests_and_locks(self, config, bounds, make_ship):
        ctrl = ShipController(config)
        out = ctrl.advance(make_ship(), InputSnapshot(fire=True), bounds)
        assert out.fire_requested
        assert not out.can_shoot
        assert out.shoot_time == 0

    def test_fire_ignored_while_locked(self, config, bounds, make_ship):
        ctrl = ShipController(config)
        ship = make_ship(can_shoot=False, shoot_time=3)
        out = ctrl.advance(ship, InputSnapshot(fire=True), bounds)
        assert not out.fire_requested
        assert out.shoot_time == 4  # not restarted

    def test_unlocks_on_twelfth_frame_at_60fps(self, config, bounds, make_ship):
        ctrl = ShipController(config)
        ship = ctrl.advance(make_ship(), InputSnapshot(fire=True), bounds)
        for frame in range(1, 12):
            ship = ctrl.advance(ship, InputSnapshot(fire=True), bounds)
            assert not ship.can_shoot, frame
            assert not ship.fire_requested, frame
        ship = ctrl.advance(ship, InputSnapshot(fire=True), bounds)
        assert ship.fire_requested

    def test_zero_cooldown_fires_every_frame(self, bounds, make_ship):
        ctrl = ShipController(GameConfig(gun=GunConfig(cooldown_s=0.0)))
        ship = make_ship()
        fired = []
        for _ in range(4):
            ship = ctrl.advance(ship, InputSnapshot(fire=True), bounds)
            fired.append(ship.fire_requested)
        assert fired == [True, True, True, True]


def test_full_friction_stops_without_reversing(bounds, make_ship):
    ctrl = ShipController(GameConfig(fps=1, ship=ShipConfig(friction=1.0)))
    ship = ctrl.advance(make_ship(vel=(3.0, -2.0)), IDLE, bounds)
    np.testing.assert_allclose(ship.vel, [0.0, 0.0])
