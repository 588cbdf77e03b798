"""Game catalog handler dependency factories.

Request-scoped handlers for games and the catalog reference data
(developers, publishers, genres, platforms).
"""

from typing import TYPE_CHECKING

from fastapi import Depends

from src.core.container.repositories import (
    get_catalog_repository,
    get_game_repository,
    get_review_repository,
)

if TYPE_CHECKING:
    from src.application.commands.handlers.game_handlers import (
        CreateCatalogEntryHandler,
        CreateGameHandler,
        DeleteGameHandler,
        UpdateGameHandler,
    )
    from src.application.queries.handlers.game_handlers import (
        GetGameHandler,
        ListCatalogEntriesHandler,
        ListGamesHandler,
        ListSimilarGamesHandler,
    )
    from src.infrastructure.persistence.repositories import (
        CatalogRepository,
        GameRepository,
        ReviewRepository,
    )


# ============================================================================
# Command Handler Factories (admin only)
# ============================================================================


async def get_create_game_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
    catalog_repo: "CatalogRepository" = Depends(get_catalog_repository),
) -> "CreateGameHandler":
    """Get CreateGame command handler (request-scoped).

    CatalogRepository is needed to validate developer, publisher, genre
    and platform references before the game is saved.

    Returns:
        CreateGameHandler instance.
    """
    from src.application.commands.handlers.game_handlers import CreateGameHandler

    return CreateGameHandler(game_repo=game_repo, catalog_repo=catalog_repo)


async def get_update_game_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
    catalog_repo: "CatalogRepository" = Depends(get_catalog_repository),
) -> "UpdateGameHandler":
    from src.application.commands.handlers.game_handlers import UpdateGameHandler

    return UpdateGameHandler(game_repo=game_repo, catalog_repo=catalog_repo)


async def get_delete_game_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "DeleteGameHandler":
    from src.application.commands.handlers.game_handlers import DeleteGameHandler

    return DeleteGameHandler(game_repo=game_repo)


async def get_create_catalog_entry_handler(
    catalog_repo: "CatalogRepository" = Depends(get_catalog_repository),
) -> "CreateCatalogEntryHandler":
    from src.application.commands.handlers.game_handlers import (
        CreateCatalogEntryHandler,
    )

    return CreateCatalogEntryHandler(catalog_repo=catalog_repo)


# ============================================================================
# Query Handler Factories
# ============================================================================


async def get_list_games_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "ListGamesHandler":
    from src.application.queries.handlers.game_handlers import ListGamesHandler

    return ListGamesHandler(game_repo=game_repo)


async def get_get_game_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
    catalog_repo: "CatalogRepository" = Depends(get_catalog_repository),
    review_repo: "ReviewRepository" = Depends(get_review_repository),
) -> "GetGameHandler":
    """Get GetGame query handler (request-scoped)."""
    from src.application.queries.handlers.game_handlers import GetGameHandler

    return GetGameHandler(
        game_repo=game_repo, catalog_repo=catalog_repo, review_repo=review_repo
    )


async def get_list_similar_games_handler(
    game_repo: "GameRepository" = Depends(get_game_repository),
) -> "ListSimilarGamesHandler":
    from src.application.queries.handlers.game_handlers import (
        ListSimilarGamesHandler,
    )

    return ListSimilarGamesHandler(game_repo=game_repo)


async def get_list_catalog_entries_handler(
    catalog_repo: "CatalogRepository" = Depends(get_catalog_repository),
) -> "ListCatalogEntriesHandler":
    from src.application.queries.handlers.game_handlers import (
        ListCatalogEntriesHandler,
    )

    return ListCatalogEntriesHandler(catalog_repo=catalog_repo)
