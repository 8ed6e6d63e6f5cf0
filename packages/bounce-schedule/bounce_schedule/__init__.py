"""bounce-schedule - Tick-counted timers for the bounce engine."""
from __future__ import annotations

from bounce_schedule.components import Timer
from bounce_schedule.queue import TimerQueue
from bounce_schedule.systems import make_timer_system

__all__ = ["Timer", "TimerQueue", "make_timer_system"]
