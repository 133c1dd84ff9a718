from .controls import Intent, IntentQueue
from .driver import FixedStepDriver
from .game import Game
from .settings import Settings
from .state import GameState

__all__ = ['FixedStepDriver', 'Game', 'GameState', 'Intent', 'IntentQueue', 'Settings']
