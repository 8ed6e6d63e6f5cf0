"""RenderScheduler - frame loop, pacing, and lifecycle for one badge."""

import logging
import os
import random
import time
from typing import Callable

from bounce_schedule import TimerQueue, make_timer_system
from bounce_signal import CancelToken, SignalBus, make_signal_system

from bounce.clock import Clock
from bounce.config import BounceConfig
from bounce.dimensions import DimensionTracker
from bounce.frames import FrameLoop
from bounce.motion import Step, make_bounce_system
from bounce.palette import ColorSelector
from bounce.placement import PlacementInitializer
from bounce.resize import make_resize_handler, reconcile
from bounce.surface import Surface
from bounce.types import BadgeState, System, TickContext, Vec

logger = logging.getLogger(__name__)

Hook = Callable[[BadgeState, TickContext], None]


class RenderScheduler:
    def __init__(
        self,
        surface: Surface,
        config: BounceConfig | None = None,
        frames: FrameLoop | None = None,
        seed: int | None = None,
    ) -> None:
        if config is None:
            config = BounceConfig()
        self._config = config
        self._surface = surface
        self._frames = frames if frames is not None else FrameLoop()
        self._clock = Clock(config.fps)

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)

        self._state = BadgeState(
            position=config.start_position,
            direction=config.start_direction,
            color=config.initial_color,
        )
        self._tracker = DimensionTracker(surface)
        self._selector = ColorSelector(config.palette, self._rng, config.initial_color)
        self._placement = PlacementInitializer(self._rng)
        self._placement_tries = 0
        self._timers = TimerQueue()
        self._bus = SignalBus()

        self._timer_system = make_timer_system(self._timers)
        self._bounce_system = make_bounce_system(
            self._tracker,
            self._selector,
            config.speed,
            placement=self._placement,
            bus=self._bus,
            on_step=self._count,
        )
        self._signal_system = make_signal_system(self._bus)
        self._systems: list[System] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []

        self._started = False
        self._torn_down = False
        self._stop_requested = False
        self._frame_token: CancelToken | None = None
        self._resize_token: CancelToken | None = None
        self._bounces = 0
        self._corners = 0

    @property
    def state(self) -> BadgeState:
        return self._state

    @property
    def config(self) -> BounceConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def signals(self) -> SignalBus:
        return self._bus

    @property
    def tracker(self) -> DimensionTracker:
        return self._tracker

    @property
    def placement(self) -> PlacementInitializer:
        return self._placement

    @property
    def timers(self) -> TimerQueue:
        return self._timers

    @property
    def frames(self) -> FrameLoop:
        return self._frames

    @property
    def running(self) -> bool:
        return self._started and not self._torn_down

    @property
    def torn_down(self) -> bool:
        return self._torn_down

    @property
    def bounces(self) -> int:
        return self._bounces

    @property
    def corners(self) -> int:
        return self._corners

    def add_system(self, system: System) -> None:
        """Run ``system`` every tick, after the bounce and before signal dispatch."""
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _count(self, step: Step) -> None:
        if step.contact:
            self._bounces += 1
        if step.corner:
            self._corners += 1

    # -- Lifecycle --

    def start(self) -> None:
        if self._torn_down:
            raise RuntimeError("scheduler has been torn down")
        if self._started:
            raise RuntimeError("scheduler already started")
        self._started = True
        self._stop_requested = False

        self._tracker.measure()
        self._timers.after(
            self._clock.ticks_for(self._config.remeasure_delay),
            "remeasure",
            self._remeasure,
        )
        self._timers.after(
            self._clock.ticks_for(self._config.placement_delay),
            "placement",
            self._attempt_placement,
        )
        self._resize_token = self._surface.subscribe_resize(
            make_resize_handler(self._state, self._tracker, self._on_reconciled)
        )

        ctx = self._clock.context(self._request_stop, self._rng)
        for hook in self._start_hooks:
            hook(self._state, ctx)

        self._schedule_frame()
        logger.debug(f"Render scheduler started (seed={self._seed}, fps={self._clock.fps})")

    def teardown(self) -> None:
        """Cancel the pending frame, the resize listener, and all timers."""
        if self._torn_down:
            return
        self._torn_down = True
        if self._frame_token is not None:
            self._frame_token.cancel()
        if self._resize_token is not None:
            self._resize_token.cancel()
        self._timers.cancel_all()
        self._bus.clear()

        if self._started:
            ctx = self._clock.context(self._request_stop, self._rng)
            for hook in self._stop_hooks:
                hook(self._state, ctx)
        logger.debug(f"Render scheduler torn down at tick {self._clock.tick_number}")

    # -- Deferred work --

    def _remeasure(self) -> None:
        dims = self._tracker.measure()
        logger.debug(
            f"Re-measured badge {dims.badge_width:g}x{dims.badge_height:g} "
            f"in arena {dims.arena_width:g}x{dims.arena_height:g}"
        )

    def _attempt_placement(self) -> None:
        # Fires from the timer system; the frame publishes the outcome.
        self._placement_tries += 1
        position = self._placement.initialize(self._tracker.measure())
        if position is not None:
            self._state.position = position
            return
        if self._placement.initialized:
            return
        if self._placement_tries < self._config.placement_attempts:
            self._timers.after(
                self._clock.ticks_for(self._config.placement_delay),
                "placement",
                self._attempt_placement,
            )
            return
        self._placement.lock()
        self._state.position = reconcile(self._state.position, self._tracker.latest)
        logger.warning(
            f"Badge geometry unavailable after {self._placement_tries} attempts, "
            "keeping start position"
        )

    def _on_reconciled(self, position: Vec) -> None:
        if self._torn_down:
            return
        self._publish()

    # -- Frames --

    def _schedule_frame(self) -> None:
        self._frame_token = self._frames.request(self._on_frame)

    def _on_frame(self) -> None:
        token = self._frame_token
        if self._torn_down or token is None or token.cancelled:
            return
        if not self._surface.attached:
            self._schedule_frame()
            return
        self._tick()
        if self._torn_down:
            return
        self._publish()
        if self._stop_requested:
            self.teardown()
            return
        self._schedule_frame()

    def _tick(self) -> None:
        self._clock.advance()
        ctx = self._clock.context(self._request_stop, self._rng)
        systems = [self._timer_system, self._bounce_system, *self._systems, self._signal_system]
        for system in systems:
            system(self._state, ctx)
            if self._stop_requested or self._torn_down:
                break

    def _publish(self) -> None:
        if self._surface.attached:
            self._surface.place_badge(self._state.position, self._state.color)

    def step(self) -> None:
        self.run(1)

    def run(self, n: int) -> None:
        """Pump ``n`` frames, starting the animation first if needed."""
        if not self._started:
            self.start()
        for _ in range(n):
            if self._torn_down:
                break
            self._frames.pump()

    def run_forever(self) -> None:
        if not self._started:
            self.start()

        dt = self._clock.dt
        while not self._torn_down:
            start = time.monotonic()
            self._frames.pump()
            if self._torn_down:
                break
            elapsed = time.monotonic() - start
            sleep_time = dt - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)
