"""Tests for actor steering and integration."""

import math

import pytest

from swarmfield.entities import Actor, EntityFactory, StaticObstacle


def make_actor(position=(0.0, 0.0), heading=0.0, **extra) -> Actor:
    cfg = {"position": list(position), "heading": heading}
    cfg.update(extra)
    return Actor("actor_swarm", cfg, 0)


def make_static(position, _id=0) -> StaticObstacle:
    return StaticObstacle("static_ring", {"position": list(position)}, _id)


class TestSteering:
    def test_turn_is_clamped_to_rate_limit(self) -> None:
        actor = make_actor(heading=0.0)
        actor.target_heading = 170.0
        delta = actor.steer(dt=0.5, max_degrees_per_second=240.0)
        assert delta == pytest.approx(120.0)
        assert actor.heading == pytest.approx(120.0)

    def test_small_turn_reaches_target(self) -> None:
        actor = make_actor(heading=10.0)
        actor.target_heading = 40.0
        actor.steer(dt=0.5, max_degrees_per_second=240.0)
        assert actor.heading == pytest.approx(40.0)

    def test_turn_takes_short_way_through_north(self) -> None:
        actor = make_actor(heading=350.0)
        actor.target_heading = 10.0
        actor.steer(dt=1.0, max_degrees_per_second=240.0)
        assert actor.heading == pytest.approx(370.0)

    def test_heading_is_not_wrapped(self) -> None:
        actor = make_actor(heading=0.0)
        actor.target_heading = 300.0
        actor.steer(dt=1.0, max_degrees_per_second=240.0)
        assert actor.heading == pytest.approx(-60.0)


class TestIntegration:
    def test_heading_zero_moves_north(self) -> None:
        actor = make_actor(heading=0.0)
        actor.advance(180.0 * 1.0)
        assert actor.get_position() == pytest.approx((0.0, -180.0))

    def test_heading_ninety_moves_east(self) -> None:
        actor = make_actor(position=(5.0, 5.0), heading=90.0)
        actor.advance(10.0)
        assert actor.get_position() == pytest.approx((15.0, 5.0))

    def test_step_with_attractor_straight_ahead(self) -> None:
        actor = make_actor(heading=0.0)
        actor.set_attractor(make_static((0.0, -1000.0)))
        actor.step(dt=1.0, speed=180.0, max_degrees_per_second=240.0)
        assert actor.target_heading == pytest.approx(0.0)
        assert actor.get_position() == pytest.approx((0.0, -180.0))

    def test_step_logs_on_actor_logger(self, caplog) -> None:
        actor = make_actor(heading=0.0)
        actor.set_attractor(make_static((0.0, -1000.0)))
        with caplog.at_level("DEBUG", logger="sim"):
            actor.step(dt=1.0, speed=180.0, max_degrees_per_second=240.0)
        (record,) = [r for r in caplog.records if r.name == "sim.actor"]
        assert record.getMessage().startswith("swarm#0 step target=0.00")


class TestPlanAhead:
    def test_attractor_to_the_east(self) -> None:
        actor = make_actor()
        actor.set_attractor(make_static((1000.0, 0.0)))
        assert actor.plan_ahead() == pytest.approx(90.0)

    def test_repulsor_outweighs_attractor(self) -> None:
        actor = make_actor()
        actor.set_attractor(make_static((1000.0, 0.0)))
        # Repulsor 10 units east pushes west with 28 units, attraction pulls east with 10.
        actor.add_repulsor(make_static((10.0, 0.0)))
        fx, fy = actor.net_force()
        assert fx == pytest.approx(-18.0)
        assert fy == pytest.approx(0.0)
        assert actor.plan_ahead() == pytest.approx(270.0)

    def test_distant_repulsors_are_ignored(self) -> None:
        actor = make_actor()
        actor.set_attractor(make_static((0.0, 1000.0)))
        for i in range(10):
            actor.add_repulsor(make_static((500.0 + i, 500.0), i))
        assert actor.net_force() == pytest.approx((0.0, 10.0))
        assert actor.plan_ahead() == pytest.approx(180.0)

    def test_target_heading_in_range(self) -> None:
        actor = make_actor(position=(3.0, 7.0))
        actor.set_attractor(make_static((-50.0, -20.0)))
        target = actor.plan_ahead()
        assert 0.0 <= target < 360.0

    def test_attractor_on_top_of_actor_is_finite(self) -> None:
        actor = make_actor(position=(2.0, 2.0))
        actor.set_attractor(make_static((2.0, 2.0)))
        actor.add_repulsor(make_static((2.0, 2.0), 1))
        assert math.isfinite(actor.plan_ahead())

    def test_uses_configured_field_parameters(self) -> None:
        actor = make_actor(attracting_power=3.0)
        actor.set_attractor(make_static((0.0, 40.0)))
        assert actor.net_force() == pytest.approx((0.0, 3.0))

    def test_missing_attractor_raises(self) -> None:
        with pytest.raises(RuntimeError):
            make_actor().plan_ahead()


class TestRelationships:
    def test_set_attractor_replaces(self) -> None:
        actor = make_actor()
        first, second = make_static((1.0, 1.0), 0), make_static((2.0, 2.0), 1)
        actor.set_attractor(first)
        actor.set_attractor(second)
        assert actor.get_attractor() is second

    def test_repulsors_keep_insertion_order(self) -> None:
        actor = make_actor()
        statics = [make_static((float(i), 0.0), i) for i in range(5)]
        for st in statics:
            actor.add_repulsor(st)
        assert actor.get_repulsors() == tuple(statics)

    def test_locked_repulsors_reject_additions(self) -> None:
        actor = make_actor()
        actor.lock_repulsors()
        with pytest.raises(RuntimeError):
            actor.add_repulsor(make_static((0.0, 0.0)))

    def test_to_dict(self) -> None:
        actor = make_actor(position=(1.0, 2.0), heading=45.0)
        actor.set_attractor(make_static((0.0, 0.0)))
        data = actor.to_dict()
        assert data["name"] == "swarm#0"
        assert data["position"] == {"x": 1.0, "y": 2.0}
        assert data["heading"] == 45.0
        assert data["attractor"] == "ring#0"
        assert data["repulsors"] == 0


class TestEntities:
    def test_static_is_immovable(self) -> None:
        st = make_static((4.0, 5.0))
        with pytest.raises(AttributeError):
            st.position = (0.0, 0.0)
        assert st.get_position() == (4.0, 5.0)

    def test_static_requires_position(self) -> None:
        with pytest.raises(ValueError):
            StaticObstacle("static_ring", {}, 0)

    def test_factory_creates_by_kind(self) -> None:
        assert isinstance(EntityFactory.create_entity("actor_swarm", {}, 3), Actor)
        assert isinstance(EntityFactory.create_entity("static_ring", {"position": [0, 0]}, 3), StaticObstacle)

    def test_factory_rejects_unknown_kind(self) -> None:
        with pytest.raises(ValueError):
            EntityFactory.create_entity("robot_x", {}, 0)

    def test_uid(self) -> None:
        assert make_actor().get_name() == "swarm#0"
        assert make_static((0.0, 0.0), 42).get_name() == "ring#42"
