from dataclasses import dataclass, field

from pyrsistent import PVector, pvector

from geocoin.components.coin import Coin


@dataclass(frozen=True)
class Purse:
    """Coins carried by the player, in the order they were collected.

    Attributes:
        coins:
            Persistent vector of held coins; the last one is deposited first.
    """

    coins: PVector[Coin] = field(default_factory=pvector)

    def __len__(self) -> int:
        return len(self.coins)
