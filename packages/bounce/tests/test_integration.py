"""Integration tests: whole animation runs against a MemorySurface."""
from __future__ import annotations

import random

import pytest
from bounce import BounceConfig, MemorySurface, RenderScheduler


def _assert_contained(scheduler: RenderScheduler) -> None:
    hx, hy = scheduler.tracker.measure().bounds
    x, y = scheduler.state.position
    assert 0.0 <= x <= hx
    assert 0.0 <= y <= hy


class TestContainment:
    """Position stays inside the arena across ticks and resizes."""

    @pytest.mark.parametrize("seed", range(8))
    def test_ticks_and_resizes(self, seed: int) -> None:
        rng = random.Random(seed)
        surface = MemorySurface(arena=(300.0, 200.0), badge=(40.0, 25.0))
        config = BounceConfig(speed=rng.choice([0.5, 1.5, 7.0]))
        scheduler = RenderScheduler(surface, config=config, seed=seed)
        scheduler.run(6)
        assert scheduler.placement.initialized

        for _ in range(60):
            scheduler.run(rng.randint(1, 40))
            _assert_contained(scheduler)
            if rng.random() < 0.5:
                surface.resize(rng.uniform(10.0, 500.0), rng.uniform(10.0, 500.0))
                _assert_contained(scheduler)

    def test_published_positions_stay_inside(self) -> None:
        surface = MemorySurface(arena=(120.0, 90.0), badge=(30.0, 30.0))
        scheduler = RenderScheduler(surface, config=BounceConfig(speed=3.0), seed=3)
        scheduler.run(6)
        for _ in range(500):
            scheduler.step()
            x, y = surface.position
            assert 0.0 <= x <= 90.0
            assert 0.0 <= y <= 60.0

    def test_oversized_badge_pinned_at_origin(self) -> None:
        surface = MemorySurface(arena=(300.0, 300.0), badge=(400.0, 400.0))
        scheduler = RenderScheduler(surface, seed=11)
        scheduler.run(6)
        bounces = scheduler.bounces
        colors = [scheduler.state.color]

        for _ in range(30):
            scheduler.step()
            assert scheduler.state.position == (0.0, 0.0)
            colors.append(scheduler.state.color)

        assert scheduler.bounces - bounces == 30
        assert all(a != b for a, b in zip(colors, colors[1:]))


class TestColorChanges:

    def test_color_changes_only_on_contact_and_never_repeats(self) -> None:
        surface = MemorySurface(arena=(80.0, 70.0), badge=(20.0, 20.0))
        scheduler = RenderScheduler(surface, config=BounceConfig(speed=2.0), seed=5)
        scheduler.run(6)

        for _ in range(400):
            before_color = scheduler.state.color
            before_bounces = scheduler.bounces
            scheduler.step()
            changed = scheduler.state.color != before_color
            contacted = scheduler.bounces - before_bounces
            assert contacted in (0, 1)
            assert changed == bool(contacted)

    def test_bounced_signals_match_color_changes(self) -> None:
        surface = MemorySurface(arena=(60.0, 60.0), badge=(20.0, 20.0))
        scheduler = RenderScheduler(surface, config=BounceConfig(speed=1.0), seed=9)
        seen = []
        scheduler.signals.subscribe("bounced", lambda name, data: seen.append(data["color"]))

        scheduler.run(300)

        assert len(seen) == scheduler.bounces
        assert seen[-1] == scheduler.state.color


class TestLifecycle:

    def test_placement_happens_once(self) -> None:
        surface = MemorySurface(arena=(300.0, 300.0), badge=(20.0, 20.0))
        scheduler = RenderScheduler(surface, seed=21)
        scheduler.run(6)
        position = scheduler.state.position

        assert scheduler.placement.initialize(scheduler.tracker.measure()) is None
        assert scheduler.state.position == position

    def test_full_lifecycle(self) -> None:
        surface = MemorySurface(arena=(640.0, 480.0))
        scheduler = RenderScheduler(surface, seed=2)
        scheduler.start()
        scheduler.run(3)
        surface.lay_out(120.0, 60.0)
        scheduler.run(200)
        surface.resize(320.0, 240.0)
        scheduler.run(200)
        scheduler.teardown()

        assert scheduler.placement.initialized
        x, y = surface.position
        assert 0.0 <= x <= 200.0
        assert 0.0 <= y <= 180.0
        assert surface.resize_listeners == 0
        assert scheduler.frames.pending == 0
