"""Wire game errors."""


class InvalidDifficultyError(ValueError):
    """Raised when a difficulty tag is not one of the four known tags.

    Fatal to the start() call that triggered it; no level is produced.
    """

    def __init__(self, value: object):
        self.value = value
        super().__init__(
            f"Invalid difficulty: {value!r} "
            f"(expected one of: easy, medium, hard, super-hard)"
        )


class StaleStateError(RuntimeError):
    """Raised when level or character state is read after destroy()
    or before the first level exists."""
