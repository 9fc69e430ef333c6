from __future__ import annotations

import math
from dataclasses import replace

from colorcycle.display.color import Color
from colorcycle.overlay.state import TAU, OverlayState
from colorcycle.utilities.env import ChannelPolicy

MAX_COLOR = 255.0
CYCLE_INCREMENT = 0.2
CHANNEL_OFFSET = TAU / 3.0


def advance(state: OverlayState, step: float = CYCLE_INCREMENT) -> OverlayState:
    """Return ``state`` moved one step along the cycle, wrapped into [0, 2π)."""

    if not 0.0 < step < TAU:
        raise ValueError(f"step must lie in (0, 2π), got {step}")

    phase = state.phase + step
    if phase >= TAU:
        phase -= TAU
    return replace(state, phase=phase)


def _round_half_away_from_zero(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def to_byte(value: float, policy: ChannelPolicy = ChannelPolicy.SATURATE) -> int:
    """Round a signed channel sample and narrow it to 0..255.

    ``SATURATE`` clamps out-of-range values to the nearest bound. ``WRAP``
    keeps the low eight bits, so -221 becomes 35.
    """

    rounded = _round_half_away_from_zero(value)
    if policy == ChannelPolicy.WRAP:
        return rounded % 256
    return min(255, max(0, rounded))


def color_at(
    phase: float, policy: ChannelPolicy = ChannelPolicy.SATURATE
) -> Color:
    """Map a cycle position onto three sine waves offset by a third of a turn."""

    phase = phase % TAU
    return Color(
        r=to_byte(math.sin(phase + CHANNEL_OFFSET) * MAX_COLOR, policy),
        g=to_byte(math.sin(phase) * MAX_COLOR, policy),
        b=to_byte(math.sin(phase - CHANNEL_OFFSET) * MAX_COLOR, policy),
    )
