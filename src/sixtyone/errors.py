from __future__ import annotations


class EngineError(ValueError):
    """Base class for calls the engine rejects. The state is never modified."""


class InvalidInputError(EngineError):
    pass


class TurnError(EngineError):
    def __init__(self, player: int, turn_player: int | None):
        self.player = player
        self.turn_player = turn_player
        if turn_player is None:
            msg = f"It's not player {player}'s turn: the hand is complete"
        else:
            msg = f"It's not player {player}'s turn (player {turn_player} to play)"
        super().__init__(msg)


class MissingCardError(EngineError):
    def __init__(self, player: int, card):
        self.player = player
        self.card = card
        super().__init__(f"Player {player} does not have {card}")
