"""Wire Game Mode.

The game state machine. Owns the timer, the current level and character,
and sequences generation, kinematics and collision once per tick.

    menu --start()--> playing --boundary--> gameover --restart()--> menu
                       |   ^  +--goal-----> victory  --restart()--> menu
               pause() |   | resume()
                       v   |
                      paused

Terminal transitions enter an "awaiting effect" sub-state: an
EffectTrigger is emitted and nothing else happens until
effect_finished() is called (or, with auto_finish_effects, until the
effect's duration has passed).

The caller owns the frame loop and calls tick() once per frame,
unconditionally; tick() is a no-op outside the playing state.
"""
import time
from typing import Callable, List, Optional, Union

from models import Point2D
from models.wire import (
    CollisionPolicy,
    Difficulty,
    Direction,
    EffectKind,
    EffectTrigger,
    GameState,
    Level,
    RunOutcome,
    RunResult,
)
from games.common.base_game import BaseGame
from games.WireGame import config
from games.WireGame.character import Character, KinematicBody
from games.WireGame.collision import CollisionTester, create_collision_tester
from games.WireGame.config import resolve_difficulty
from games.WireGame.effects import PendingEffect, start_effect
from games.WireGame.errors import StaleStateError
from games.WireGame.level_generator import LevelGenerator, PathGenerator
from iraira.logging import emit_record, get_logger

log = get_logger('game_mode')

CharacterFactory = Callable[[Point2D, float], KinematicBody]
StateListener = Callable[[GameState, GameState], None]
EffectListener = Callable[[EffectTrigger], None]
ResultListener = Callable[[RunResult], None]


class WireGameMode(BaseGame):
    """Wire game state machine.

    Core loop:
    1. start() generates a level and places the character at its start
    2. Each tick: recompute elapsed time, move the character, then test
       boundary and goal against the post-move position
    3. Boundary hit = gameover, goal hit = victory; both freeze the timer
       and record the score
    4. restart() returns to the menu with a fresh level
    """

    # Game metadata
    NAME = "Wire Game"
    DESCRIPTION = "Steer through the corridor to the goal without touching the walls."
    VERSION = "1.0.0"
    AUTHOR = "Iraira Team"

    # CLI argument definitions
    ARGUMENTS = [
        {
            'name': '--difficulty',
            'type': str,
            'default': 'easy',
            'choices': [d.value for d in Difficulty],
            'help': 'Difficulty: easy, medium, hard, super-hard'
        },
        {
            'name': '--policy',
            'type': str,
            'default': None,
            'choices': [p.value for p in CollisionPolicy],
            'help': 'Collision policy: corridor (strict tube) or rectangle (wall blocks)'
        },
    ]

    def __init__(
        self,
        canvas_width: int = config.SCREEN_WIDTH,
        canvas_height: int = config.SCREEN_HEIGHT,
        difficulty: Union[str, Difficulty] = Difficulty.EASY,
        policy: Optional[Union[str, CollisionPolicy]] = None,
        generator: Optional[PathGenerator] = None,
        collision: Optional[CollisionTester] = None,
        character_factory: CharacterFactory = Character,
        character_size: float = config.CHARACTER_SIZE,
        time_source: Callable[[], float] = time.monotonic,
        auto_finish_effects: bool = False,
        **kwargs,
    ):
        """Initialize the game in the menu state.

        Args:
            canvas_width: Canvas width in pixels
            canvas_height: Canvas height in pixels
            difficulty: Default difficulty for start()
            policy: Collision policy (None = collision's policy, else config default)
            generator: Level generator (default: LevelGenerator for the policy)
            collision: Collision tester (default: tester for the policy)
            character_factory: Builds the character from (start, size)
            character_size: Side of the character's bounding square
            time_source: Clock in seconds; must be monotonic
            auto_finish_effects: Call effect_finished() once an effect expires

        Raises:
            InvalidDifficultyError: If difficulty is not a known tag
        """
        self._canvas_width = canvas_width
        self._canvas_height = canvas_height
        self._difficulty = resolve_difficulty(difficulty)

        if policy is None:
            policy = collision.policy if collision is not None else config.COLLISION_POLICY
        policy = CollisionPolicy(policy)

        self._collision = collision if collision is not None else create_collision_tester(policy)
        self._generator = generator if generator is not None else LevelGenerator(policy=policy)
        self._character_factory = character_factory
        self._character_size = character_size
        self._time_source = time_source
        self._auto_finish_effects = auto_finish_effects

        self._state = GameState.MENU
        self._level: Optional[Level] = None
        self._character: Optional[KinematicBody] = None
        self._destroyed = False

        # Timer (seconds from time_source)
        self._start_time = 0.0
        self._paused_at: Optional[float] = None
        self._elapsed_ms = 0
        self._score_ms = 0

        self._pending_effect: Optional[PendingEffect] = None
        self._result: Optional[RunResult] = None

        self._state_listeners: List[StateListener] = []
        self._effect_listeners: List[EffectListener] = []
        self._result_listeners: List[ResultListener] = []

    # =========================================================================
    # Commands
    # =========================================================================

    def start(self, difficulty: Optional[Union[str, Difficulty]] = None) -> None:
        """Start a run on a freshly generated level.

        Starting from any state other than menu restarts first.

        Raises:
            InvalidDifficultyError: Unknown difficulty; state is unchanged
                and no level is exposed
        """
        tag = resolve_difficulty(difficulty if difficulty is not None else self._difficulty)

        if self._state != GameState.MENU:
            log.info("start() while %s: restarting first", self._state.value)
            self.restart()

        level = self._generator.generate(self._canvas_width, self._canvas_height, tag)

        self._difficulty = tag
        self._install_level(level)
        self._start_time = self._time_source()
        self._paused_at = None
        self._elapsed_ms = 0
        self._score_ms = 0
        self._result = None
        self._pending_effect = None
        self._destroyed = False

        log.info("Run started: %s, speed=%s", tag.value, level.speed)
        self._set_state(GameState.PLAYING)

    def tick(self) -> None:
        """Advance one frame. No-op unless playing."""
        if self._destroyed:
            return

        if self._pending_effect is not None and self._auto_finish_effects:
            if self._pending_effect.is_expired(self.now_ms()):
                self.effect_finished()

        if self._state != GameState.PLAYING:
            return

        now = self._time_source()
        self._elapsed_ms = self._elapsed_at(now)

        level = self.level
        character = self.character

        # Move first, then test where the character ended up
        character.tick(level.speed)
        log.trace("Tick %d ms at %s", self._elapsed_ms, character.position)

        if self._collision.test_boundary(character, level):
            point = self._collision.last_collision_point() or character.bounds().center
            self._finish_run(RunOutcome.GAMEOVER, EffectTrigger(kind=EffectKind.COLLISION, point=point))
        elif self._collision.test_goal(character, level):
            self._finish_run(RunOutcome.VICTORY, EffectTrigger(kind=EffectKind.GOAL, point=level.goal))

    def handle_direction(self, direction: Union[str, Direction]) -> bool:
        """Deliver one directional input event.

        Ignored (no error, no queueing) unless input is enabled.

        Returns:
            True if the event reached the character
        """
        if not self.is_input_enabled:
            log.debug("Ignoring %r while %s", direction, self._state.value)
            return False
        self.character.set_heading(direction)
        return True

    def handle_input(self, events: List[Union[str, Direction]]) -> None:
        """Deliver a batch of directional events in order."""
        for event in events:
            self.handle_direction(event)

    def pause(self) -> None:
        """Suspend the run. Paused time is excluded from the timer."""
        if self._state != GameState.PLAYING:
            return
        now = self._time_source()
        self._elapsed_ms = self._elapsed_at(now)
        self._paused_at = now
        self._set_state(GameState.PAUSED)

    def resume(self) -> None:
        """Resume a paused run."""
        if self._state != GameState.PAUSED or self._paused_at is None:
            return
        # Shifting the base excludes every paused interval, cumulatively
        self._start_time += self._time_source() - self._paused_at
        self._paused_at = None
        self._set_state(GameState.PLAYING)

    def restart(self) -> None:
        """Return to the menu with a fresh level. Callable from any state."""
        self._pending_effect = None
        self._result = None
        self._paused_at = None
        self._start_time = 0.0
        self._elapsed_ms = 0
        self._score_ms = 0
        self._destroyed = False

        self._install_level(
            self._generator.generate(self._canvas_width, self._canvas_height, self._difficulty)
        )
        self._set_state(GameState.MENU)

    def destroy(self) -> None:
        """Tear down. Level and character become inaccessible until start()."""
        self._destroyed = True
        self._level = None
        self._character = None
        self._pending_effect = None
        self._result = None
        self._paused_at = None
        self._elapsed_ms = 0
        self._score_ms = 0
        self._collision.reset()
        self._state_listeners.clear()
        self._effect_listeners.clear()
        self._result_listeners.clear()
        self._state = GameState.MENU
        log.info("Destroyed")

    def effect_finished(self) -> None:
        """Signal that the terminal animation has completed."""
        if self._pending_effect is None:
            return
        log.debug("Effect finished: %s", self._pending_effect.kind.value)
        self._pending_effect = None
        if self._result is not None:
            for listener in list(self._result_listeners):
                listener(self._result)

    # =========================================================================
    # Listeners
    # =========================================================================

    def add_state_listener(self, listener: StateListener) -> None:
        """Called with (old_state, new_state) on every transition."""
        self._state_listeners.append(listener)

    def add_effect_listener(self, listener: EffectListener) -> None:
        """Called with the EffectTrigger on gameover/victory."""
        self._effect_listeners.append(listener)

    def add_result_listener(self, listener: ResultListener) -> None:
        """Called with the RunResult once the terminal effect has finished."""
        self._result_listeners.append(listener)

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def level(self) -> Level:
        """Current level.

        Raises:
            StaleStateError: Before the first level or after destroy()
        """
        if self._level is None:
            raise StaleStateError("No level: call start() first")
        return self._level

    @property
    def character(self) -> KinematicBody:
        """Current character.

        Raises:
            StaleStateError: Before the first level or after destroy()
        """
        if self._character is None:
            raise StaleStateError("No character: call start() first")
        return self._character

    @property
    def difficulty(self) -> Difficulty:
        return self._difficulty

    @property
    def speed(self) -> float:
        """Character speed of the current level."""
        return self.level.speed

    @property
    def elapsed_ms(self) -> int:
        """Elapsed run time as of the last tick (frozen outside playing)."""
        return self._elapsed_ms

    @property
    def score_ms(self) -> int:
        """Recorded score; 0 until a terminal transition."""
        return self._score_ms

    @property
    def result(self) -> Optional[RunResult]:
        """Final result while in gameover/victory, else None."""
        return self._result

    @property
    def pending_effect(self) -> Optional[PendingEffect]:
        return self._pending_effect

    @property
    def is_awaiting_effect(self) -> bool:
        return self._pending_effect is not None

    @property
    def is_input_enabled(self) -> bool:
        return self._state == GameState.PLAYING and self._pending_effect is None

    @property
    def collision(self) -> CollisionTester:
        return self._collision

    def get_score(self) -> int:
        """Score for display: live elapsed time during a run, else the recorded score."""
        if self._state in (GameState.PLAYING, GameState.PAUSED):
            return self._elapsed_ms
        return self._score_ms

    # =========================================================================
    # Internals
    # =========================================================================

    def now_ms(self) -> int:
        """Clock time in milliseconds, for effect progress."""
        return int(round(self._time_source() * 1000))

    def _elapsed_at(self, now: float) -> int:
        return max(0, int(round((now - self._start_time) * 1000)))

    def _install_level(self, level: Level) -> None:
        """Replace level and character; nothing from the previous run survives."""
        self._level = level
        self._character = self._character_factory(level.start, self._character_size)
        self._collision.reset()

    def _set_state(self, new_state: GameState) -> None:
        old_state = self._state
        self._state = new_state
        if old_state != new_state:
            log.info("State %s -> %s", old_state.value, new_state.value)
        for listener in list(self._state_listeners):
            listener(old_state, new_state)

    def _finish_run(self, outcome: RunOutcome, trigger: EffectTrigger) -> None:
        """Freeze the timer, record the score and enter the effect window."""
        self._score_ms = self._elapsed_ms
        self._result = RunResult(
            outcome=outcome,
            score_ms=self._score_ms,
            difficulty=self._difficulty,
            collision_point=trigger.point if outcome == RunOutcome.GAMEOVER else None,
        )
        self._pending_effect = start_effect(trigger, self.now_ms())

        log.info("Run ended: %s at %d ms", outcome.value, self._score_ms)
        emit_record('runs', self._result.to_record())

        self._set_state(
            GameState.VICTORY if outcome == RunOutcome.VICTORY else GameState.GAME_OVER
        )
        for listener in list(self._effect_listeners):
            listener(trigger)
