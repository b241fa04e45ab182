"""Terminal effect window.

After a gameover or victory transition the state machine enters an
"awaiting effect completion" sub-state. It holds one PendingEffect until
the animation collaborator calls effect_finished(), or until the effect
expires when the state machine finishes effects itself.
"""

from dataclasses import dataclass

from models.wire import EffectKind, EffectTrigger
from games.WireGame import config

EFFECT_DURATIONS_MS = {
    EffectKind.COLLISION: config.EXPLOSION_DURATION_MS,
    EffectKind.GOAL: config.VICTORY_DURATION_MS,
}


@dataclass(frozen=True)
class PendingEffect:
    """An effect in flight.

    Attributes:
        trigger: What was emitted to the animation collaborator
        started_ms: Clock time the effect started, in milliseconds
        duration_ms: How long the effect plays
    """

    trigger: EffectTrigger
    started_ms: int
    duration_ms: int

    @property
    def kind(self) -> EffectKind:
        return self.trigger.kind

    def progress(self, now_ms: int) -> float:
        """Fraction of the effect played, clamped to [0, 1]."""
        if self.duration_ms <= 0:
            return 1.0
        return min(max((now_ms - self.started_ms) / self.duration_ms, 0.0), 1.0)

    def is_expired(self, now_ms: int) -> bool:
        return now_ms - self.started_ms >= self.duration_ms


def start_effect(trigger: EffectTrigger, now_ms: int) -> PendingEffect:
    """Begin the effect for a trigger with its standard duration."""
    return PendingEffect(
        trigger=trigger,
        started_ms=now_ms,
        duration_ms=EFFECT_DURATIONS_MS[trigger.kind],
    )
