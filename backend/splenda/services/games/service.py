from typing import Dict, List, Optional

from . import lifecycle
from .randomness import RandomSource, SystemRandomSource
from .rules import Buy, Reserve, TakeThree, TakeTwo
from .sequencer import TurnSequencer
from .store import Store


class GameService:
    """Entry point used by the HTTP layer.

    Moves are parsed before a transaction opens, so malformed input never
    reaches the database.
    """

    def __init__(self, store: Optional[Store] = None, rng: Optional[RandomSource] = None):
        self.store = store or Store()
        self.rng = rng or SystemRandomSource()
        self.sequencer = TurnSequencer(self.store)

    def new_game(self, creator: str, players: List[str]) -> str:
        return lifecycle.create_game(self.store, creator, players, self.rng)

    def get_game(self, game_id: str, user_id: str) -> dict:
        return lifecycle.get_game(self.store, game_id, user_id)

    def list_games(self, user_id: str) -> Dict[str, List[str]]:
        return lifecycle.list_games(self.store, user_id)

    def delete_game(self, game_id: str, user_id: str) -> None:
        lifecycle.delete_game(self.store, game_id, user_id)

    def take_three(self, game_id: str, user_id: str, colors) -> int:
        return self.sequencer.apply_move(game_id, user_id, TakeThree.parse(colors))

    def take_two(self, game_id: str, user_id: str, color) -> int:
        return self.sequencer.apply_move(game_id, user_id, TakeTwo.parse(color))

    def reserve(self, game_id: str, user_id: str, tier, index) -> int:
        return self.sequencer.apply_move(game_id, user_id, Reserve.parse(tier, index))

    def buy(self, game_id: str, user_id: str, tier, index) -> int:
        return self.sequencer.apply_move(game_id, user_id, Buy.parse(tier, index))
