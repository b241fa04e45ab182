"""Direction input sources."""

from games.WireGame.input.sources.base import InputSource
from games.WireGame.input.sources.keyboard import (
    KeyboardDirectionSource,
    direction_for_key,
)

__all__ = ['InputSource', 'KeyboardDirectionSource', 'direction_for_key']
