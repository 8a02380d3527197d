"""Common type aliases.

``SpawnFn`` and ``CountFn`` are the extension points through which a caller
(typically a UI seeded by a deterministic "luck" function) decides where
caches exist and how many coins they start with. The engine never computes
these itself.
"""

from typing import Callable, TYPE_CHECKING


# Forward declaration to avoid circular imports:
if TYPE_CHECKING:
    from geocoin.components import Cell

Serial = int

SpawnFn = Callable[["Cell"], bool]
CountFn = Callable[["Cell"], int]
