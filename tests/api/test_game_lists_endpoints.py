"""API tests for game lists and their entries."""

from uuid import UUID

import pytest
from uuid_extensions import uuid7

from src.application.commands.handlers.game_list_handlers import GameListError
from src.application.queries.handlers.game_list_handlers import GameListQueryError
from src.core.container import (
    get_add_game_list_entry_handler,
    get_create_game_list_handler,
    get_delete_game_list_handler,
    get_get_game_list_handler,
    get_list_game_lists_handler,
    get_remove_game_list_entry_handler,
    get_update_game_list_handler,
)
from src.core.result import Failure, Success
from src.domain.entities.game_list import GameList, GameListEntry
from src.main import app

OWNER = UUID("0192f0a4-3333-7b9a-8d2f-3a4b5c6d7e01")
MY_LIST = UUID("0192f0a4-3333-7b9a-8d2f-3a4b5c6d7e02")
OTHER_LIST = UUID("0192f0a4-3333-7b9a-8d2f-3a4b5c6d7e03")
LISTED_GAME = UUID("0192f0a4-3333-7b9a-8d2f-3a4b5c6d7e04")


def _game_list(list_id: UUID = MY_LIST, **overrides) -> GameList:
    game_list = GameList(id=list_id, user_id=OWNER, name="Comfort games")
    game_list.entries = [
        GameListEntry(id=uuid7(), list_id=list_id, game_id=uuid7(), order=1),
        GameListEntry(id=uuid7(), list_id=list_id, game_id=LISTED_GAME, order=0),
    ]
    for name, value in overrides.items():
        setattr(game_list, name, value)
    return game_list


# =============================================================================
# Test Doubles
# =============================================================================


class StubListGameListsHandler:
    def __init__(self):
        self.queries = []

    async def handle(self, query):
        self.queries.append(query)
        return Success(value=[_game_list()])


class StubGetGameListHandler:
    async def handle(self, query):
        if query.list_id != MY_LIST or query.viewer_id != OWNER:
            return Failure(error=GameListQueryError.LIST_NOT_FOUND)
        return Success(value=_game_list(is_public=False))


class StubCreateGameListHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        return Success(
            value=GameList(
                id=uuid7(),
                user_id=cmd.user_id,
                name=cmd.name,
                description=cmd.description,
                is_public=cmd.is_public,
            )
        )


class StubUpdateGameListHandler:
    def __init__(self):
        self.commands = []

    async def handle(self, cmd):
        self.commands.append(cmd)
        if cmd.list_id == OTHER_LIST:
            return Failure(error=GameListError.NOT_OWNER)
        return Success(value=_game_list(cmd.list_id, **cmd.changes))


class StubDeleteGameListHandler:
    async def handle(self, cmd):
        if cmd.list_id == OTHER_LIST:
            return Failure(error=GameListError.NOT_OWNER)
        if cmd.list_id != MY_LIST:
            return Failure(error=GameListError.LIST_NOT_FOUND)
        return Success(value=None)


class StubAddGameListEntryHandler:
    async def handle(self, cmd):
        if cmd.game_id == LISTED_GAME:
            return Failure(error=GameListError.GAME_ALREADY_IN_LIST)
        if cmd.list_id == OTHER_LIST:
            return Failure(error=GameListError.NOT_OWNER)
        if cmd.notes == "unknown":
            return Failure(error=GameListError.GAME_NOT_FOUND)
        return Success(
            value=GameListEntry(
                id=uuid7(),
                list_id=cmd.list_id,
                game_id=cmd.game_id,
                order=2 if cmd.order is None else cmd.order,
                notes=cmd.notes,
            )
        )


class StubRemoveGameListEntryHandler:
    async def handle(self, cmd):
        if cmd.game_id != LISTED_GAME:
            return Failure(error=GameListError.GAME_NOT_IN_LIST)
        return Success(value=None)


@pytest.fixture(autouse=True)
def override_dependencies():
    app.dependency_overrides[get_get_game_list_handler] = StubGetGameListHandler
    app.dependency_overrides[get_delete_game_list_handler] = StubDeleteGameListHandler
    app.dependency_overrides[get_add_game_list_entry_handler] = (
        StubAddGameListEntryHandler
    )
    app.dependency_overrides[get_remove_game_list_entry_handler] = (
        StubRemoveGameListEntryHandler
    )


@pytest.fixture
def list_handler():
    handler = StubListGameListsHandler()
    app.dependency_overrides[get_list_game_lists_handler] = lambda: handler
    return handler


@pytest.fixture
def create_handler():
    handler = StubCreateGameListHandler()
    app.dependency_overrides[get_create_game_list_handler] = lambda: handler
    return handler


@pytest.fixture
def update_handler():
    handler = StubUpdateGameListHandler()
    app.dependency_overrides[get_update_game_list_handler] = lambda: handler
    return handler


# =============================================================================
# Lists
# =============================================================================


@pytest.mark.api
class TestReadGameLists:
    def test_list_omits_entries(self, client, list_handler):
        response = client.get("/api/v1/game-lists", params={"user_id": str(OWNER)})

        assert response.status_code == 200
        (game_list,) = response.json()
        assert game_list["entries"] == []
        assert game_list["entries_count"] == 2
        (query,) = list_handler.queries
        assert query.user_id == OWNER
        assert query.viewer_id is None

    def test_list_passes_viewer(self, client, auth_headers, list_handler):
        client.get(
            "/api/v1/game-lists",
            params={"user_id": str(OWNER)},
            headers=auth_headers(user_id=OWNER),
        )

        (query,) = list_handler.queries
        assert query.viewer_id == OWNER

    def test_list_requires_owner_param(self, client, list_handler):
        response = client.get("/api/v1/game-lists")

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == "user_id"

    def test_get_orders_entries_by_position(self, client, auth_headers):
        response = client.get(
            f"/api/v1/game-lists/{MY_LIST}", headers=auth_headers(user_id=OWNER)
        )

        assert response.status_code == 200
        entries = response.json()["entries"]
        assert [entry["order"] for entry in entries] == [0, 1]
        assert entries[0]["game_id"] == str(LISTED_GAME)

    def test_private_list_hidden_from_others(self, client, auth_headers):
        response = client.get(f"/api/v1/game-lists/{MY_LIST}", headers=auth_headers())

        assert response.status_code == 404
        assert response.json()["detail"] == "Game list not found"


@pytest.mark.api
class TestWriteGameLists:
    def test_create_requires_auth(self, client, create_handler):
        response = client.post("/api/v1/game-lists", json={"name": "Backlog"})

        assert response.status_code == 401
        assert create_handler.commands == []

    def test_create(self, client, auth_headers, create_handler):
        response = client.post(
            "/api/v1/game-lists",
            json={"name": "Backlog", "is_public": False},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["name"] == "Backlog"
        assert body["is_public"] is False
        assert body["entries_count"] == 0
        (cmd,) = create_handler.commands
        assert cmd.user_id == OWNER

    def test_create_rejects_empty_name(self, client, auth_headers, create_handler):
        response = client.post(
            "/api/v1/game-lists", json={"name": ""}, headers=auth_headers(user_id=OWNER)
        )

        assert response.status_code == 422
        assert create_handler.commands == []

    def test_update_sends_only_given_fields(self, client, auth_headers, update_handler):
        response = client.patch(
            f"/api/v1/game-lists/{MY_LIST}",
            json={"name": "Cozy games", "description": None},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 200
        assert response.json()["name"] == "Cozy games"
        (cmd,) = update_handler.commands
        assert cmd.changes == {"name": "Cozy games", "description": None}

    @pytest.mark.parametrize("field", ["name", "is_public"])
    def test_update_rejects_null(self, client, auth_headers, update_handler, field):
        response = client.patch(
            f"/api/v1/game-lists/{MY_LIST}",
            json={field: None},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 422
        assert response.json()["errors"][0]["field"] == field
        assert update_handler.commands == []

    def test_update_foreign_list_is_forbidden(
        self, client, auth_headers, update_handler
    ):
        response = client.patch(
            f"/api/v1/game-lists/{OTHER_LIST}",
            json={"name": "Mine now"},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 403

    def test_delete(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/game-lists/{MY_LIST}", headers=auth_headers(user_id=OWNER)
        )

        assert response.status_code == 204

    def test_delete_foreign_list_is_forbidden(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/game-lists/{OTHER_LIST}", headers=auth_headers(user_id=OWNER)
        )

        assert response.status_code == 403

    def test_delete_unknown_list(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/game-lists/{uuid7()}", headers=auth_headers(user_id=OWNER)
        )

        assert response.status_code == 404


# =============================================================================
# Entries
# =============================================================================


@pytest.mark.api
class TestGameListEntries:
    def test_add_entry(self, client, auth_headers):
        game_id = uuid7()
        response = client.post(
            f"/api/v1/game-lists/{MY_LIST}/entries",
            json={"game_id": str(game_id), "notes": "Play on the couch"},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 201
        body = response.json()
        assert body["game_id"] == str(game_id)
        assert body["order"] == 2
        assert body["notes"] == "Play on the couch"

    def test_add_entry_at_position(self, client, auth_headers):
        response = client.post(
            f"/api/v1/game-lists/{MY_LIST}/entries",
            json={"game_id": str(uuid7()), "order": 0},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 201
        assert response.json()["order"] == 0

    def test_add_entry_rejects_negative_order(self, client, auth_headers):
        response = client.post(
            f"/api/v1/game-lists/{MY_LIST}/entries",
            json={"game_id": str(uuid7()), "order": -1},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 422

    def test_add_listed_game_is_conflict(self, client, auth_headers):
        response = client.post(
            f"/api/v1/game-lists/{MY_LIST}/entries",
            json={"game_id": str(LISTED_GAME)},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 409
        assert response.json()["detail"] == "Game already in list"

    def test_add_unknown_game_names_field(self, client, auth_headers):
        response = client.post(
            f"/api/v1/game-lists/{MY_LIST}/entries",
            json={"game_id": str(uuid7()), "notes": "unknown"},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 400
        assert response.json()["errors"][0]["field"] == "game_id"

    def test_add_to_foreign_list_is_forbidden(self, client, auth_headers):
        response = client.post(
            f"/api/v1/game-lists/{OTHER_LIST}/entries",
            json={"game_id": str(uuid7())},
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 403

    def test_remove_entry(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/game-lists/{MY_LIST}/entries/{LISTED_GAME}",
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 204

    def test_remove_missing_entry(self, client, auth_headers):
        response = client.delete(
            f"/api/v1/game-lists/{MY_LIST}/entries/{uuid7()}",
            headers=auth_headers(user_id=OWNER),
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "Game not in list"
