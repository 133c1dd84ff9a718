from .game import Game

# Longest stretch of real time a single advance will simulate
MAX_FRAME_TIME = 0.25


class FixedStepDriver:
    """Turns irregular host time into whole simulation frames.

    `advance` may run zero, one or several `Game.update` calls; the leftover
    fraction of a frame carries over to the next call.
    """

    def __init__(self, game: Game, max_frame_time: float = MAX_FRAME_TIME) -> None:
        self.game = game
        self.step = 1.0 / game.settings.fps
        self.max_frame_time = max_frame_time
        self.accumulator = 0.0
        self.frame_count = 0

    def advance(self, elapsed: float) -> int:
        self.accumulator += min(max(elapsed, 0.0), self.max_frame_time)
        ticks = 0
        while self.accumulator >= self.step:
            self.game.update()
            self.accumulator -= self.step
            self.frame_count += 1
            ticks += 1
        return ticks
