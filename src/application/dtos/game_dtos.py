"""Game catalog DTOs."""

from dataclasses import dataclass, field

from src.domain.entities.catalog import Developer, Genre, Platform, Publisher
from src.domain.entities.game import Game
from src.domain.protocols import ReviewView


@dataclass(frozen=True, kw_only=True)
class GameDetail:
    """Game with its catalog references resolved and latest reviews."""

    game: Game
    developer: Developer | None = None
    publisher: Publisher | None = None
    genres: list[Genre] = field(default_factory=list)
    platforms: list[Platform] = field(default_factory=list)
    recent_reviews: list[ReviewView] = field(default_factory=list)
