"""
Errors Module - Exceptions raised by the puzzle engine.

Illegal moves are not exceptions: move_disc() reports them by
returning False. The only hard failure is a bad configuration.
"""


class InvalidConfiguration(ValueError):
    """
    Raised when an engine is configured with an unsupported disc count.

    Attributes:
        disc_count: The rejected value
        minimum: Smallest supported disc count
        maximum: Largest supported disc count
    """

    def __init__(self, disc_count, minimum: int, maximum: int):
        self.disc_count = disc_count
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Disc count must be an integer between {minimum} and {maximum}, "
            f"got {disc_count!r}"
        )
