"""Tests for World: state machine, per-tick update, culling and spawning.

Covers:
- Uninitialized → Active on first resize
- Expiry and boundary culling (all four edges)
- Resize takes effect on the next step, not immediately
- Spawn policy: appended after culling, uniform position/direction
- Bounds invariant after every step
- Spawn frequency converges to 1/32
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from sims.config import SimulationConfig
from sims.core.entities import Slug
from sims.core.enums import Direction
from sims.core.models import PreciseCoordinates
from sims.core.world import World
from tests.helpers.fixtures import Marker, make_config, make_world


def _slug(x: float, y: float, direction: Direction) -> Slug:
    return Slug(PreciseCoordinates(x, y), direction)


class TestLifecycle:

    def test_starts_uninitialized(self):
        world = World(make_config())
        assert not world.initialized
        assert (world.width, world.height) == (0, 0)
        assert world.age == 0

    def test_first_resize_activates(self):
        world = World(make_config())
        world.resize(12, 7)
        assert world.initialized
        assert (world.width, world.height) == (12, 7)

    def test_negative_size_rejected(self):
        world = World(make_config())
        with pytest.raises(ValueError):
            world.resize(-1, 5)
        assert not world.initialized

    def test_step_increments_age(self):
        world = make_world()
        for expected in range(1, 6):
            world.step()
            assert world.age == expected

    def test_uninitialized_world_never_spawns(self):
        world = World(make_config(spawn_chance=1))
        for _ in range(10):
            world.step()
        assert len(world.entities) == 0
        assert world.age == 10

    def test_add_entity_assigns_id(self):
        world = make_world()
        a, b = Marker(1, 1), Marker(2, 2)
        world.add_entity(a)
        world.add_entity(b)
        assert a.id != 0 and b.id != 0 and a.id != b.id


class TestCulling:

    def test_slug_survives_in_bounds(self):
        world = make_world(10, 10)
        slug = _slug(5.0, 5.0, Direction.NORTH)
        world.add_entity(slug)
        for _ in range(5):
            world.step()
        assert list(world.entities) == [slug]
        assert slug.discrete_position().y == 4

    def test_expired_slug_removed_on_tick_257(self):
        world = make_world(1000, 1000)
        slug = _slug(500.0, 500.0, Direction.EAST)
        world.add_entity(slug)
        for _ in range(256):
            world.step()
        assert slug in list(world.entities)
        assert slug.age == 256
        world.step()
        assert slug not in list(world.entities)
        assert world.total_expired == 1
        assert world.total_culled == 0

    def test_west_edge_culls_below_zero(self):
        """x = -0.48 still rounds to 0; x = -0.6 rounds to -1 and is culled."""
        world = make_world(10, 10)
        slug = _slug(0.0, 5.0, Direction.WEST)
        world.add_entity(slug)
        for _ in range(4):
            world.step()
        assert slug in list(world.entities)
        world.step()
        assert slug not in list(world.entities)
        assert world.total_culled == 1

    def test_north_edge(self):
        world = make_world(10, 10)
        slug = _slug(3.0, 0.0, Direction.NORTH)
        world.add_entity(slug)
        for _ in range(5):
            world.step()
        assert len(world.entities) == 0

    def test_east_edge(self):
        world = make_world(10, 10)
        slug = _slug(9.0, 0.0, Direction.EAST)
        world.add_entity(slug)
        for _ in range(4):
            world.step()
        assert slug.discrete_position().x == 9
        world.step()
        assert len(world.entities) == 0

    def test_south_edge(self):
        world = make_world(10, 10)
        slug = _slug(0.0, 9.0, Direction.SOUTH)
        world.add_entity(slug)
        for _ in range(5):
            world.step()
        assert len(world.entities) == 0

    def test_advance_called_even_when_out_of_bounds(self):
        world = make_world(5, 5)
        outside = Marker(7, 7)
        world.add_entity(outside)
        world.step()
        assert outside.advanced == 1
        assert len(world.entities) == 0

    def test_shrinking_resize_culls_on_next_step(self):
        world = make_world(10, 10)
        marker = Marker(8, 8)
        world.add_entity(marker)
        world.resize(5, 5)
        assert list(world.entities) == [marker], "Resize must not clip immediately"
        world.step()
        assert len(world.entities) == 0

    def test_growing_resize_keeps_entities(self):
        world = make_world(5, 5)
        marker = Marker(4, 4)
        world.add_entity(marker)
        world.resize(20, 20)
        world.step()
        assert list(world.entities) == [marker]

    def test_cull_preserves_order_of_survivors(self):
        world = make_world(10, 10)
        a, b, c = Marker(1, 1), Marker(50, 50), Marker(2, 2)
        for m in (a, b, c):
            world.add_entity(m)
        world.step()
        assert list(world.entities) == [a, c]

    def test_cull_and_expire_emit_events(self):
        world = make_world(10, 10)
        world.add_entity(Slug(PreciseCoordinates(1.0, 1.0), Direction.EAST, age_threshold=0))
        world.add_entity(Marker(99, 99))
        world.step()
        categories = sorted(ev.category for ev in world.tick_events)
        assert categories == ["cull", "expire"]


class TestSpawning:

    def test_spawn_every_tick_with_chance_one(self):
        world = make_world(10, 10, spawn_chance=1)
        world.step()
        assert len(world.entities) == 1
        assert world.total_spawned == 1

    def test_fresh_spawn_not_advanced_same_tick(self):
        world = make_world(10, 10, spawn_chance=1)
        world.step()
        (slug,) = list(world.entities)
        assert slug.age == 0

    def test_spawn_position_and_direction(self):
        world = make_world(7, 3, spawn_chance=1, slug_age_threshold=0)
        directions: set[Direction] = set()
        for _ in range(200):
            world.step()
            newest = list(world.entities)[-1]
            assert newest.position.x == int(newest.position.x)
            assert newest.position.y == int(newest.position.y)
            assert 0 <= newest.position.x < 7
            assert 0 <= newest.position.y < 3
            directions.add(newest.movement_direction)
        assert directions == set(Direction)

    def test_spawn_uses_config(self):
        world = make_world(10, 10, spawn_chance=1, slug_speed=0.5, slug_age_threshold=3, slug_symbol="@")
        world.step()
        (slug,) = list(world.entities)
        assert (slug.speed, slug.age_threshold, slug.render_symbol()) == (0.5, 3, "@")

    def test_spawn_event_carries_entity_id(self):
        world = make_world(10, 10, spawn_chance=1)
        world.step()
        (slug,) = list(world.entities)
        spawn_events = [ev for ev in world.tick_events if ev.category == "spawn"]
        assert len(spawn_events) == 1
        assert spawn_events[0].entity_ids == (slug.id,)
        assert spawn_events[0].tick == 1

    @pytest.mark.slow
    def test_spawn_rate_converges(self):
        """Default 1/32 per tick, within five standard deviations."""
        world = World(SimulationConfig(world_seed=7))
        world.resize(40, 40)
        ticks = 20_000
        for _ in range(ticks):
            world.step()
        rate = world.total_spawned / ticks
        assert rate == pytest.approx(1 / 32, abs=0.006)


class TestBoundsInvariant:

    @pytest.mark.parametrize("seed", [0, 1, 42])
    def test_every_survivor_in_bounds(self, seed):
        world = make_world(20, 8, world_seed=seed, spawn_chance=3)
        for tick in range(1500):
            world.step()
            for e in world.entities:
                p = e.discrete_position()
                assert 0 <= p.x < 20 and 0 <= p.y < 8, f"{e!r} out of bounds at tick {tick}"

    def test_invariant_holds_across_resizes(self):
        world = make_world(30, 30, spawn_chance=2)
        for size in (30, 12, 25, 4, 18):
            world.resize(size, size)
            for _ in range(100):
                world.step()
                assert all(e.discrete_position().in_bounds(size, size) for e in world.entities)
