"""Board API tests — reads are public, writes need a logged-in owner."""

import pytest
from sqlalchemy import func, select

from blogboard.db.models import Reply


async def _create(ac, title="A", content="hello"):
    r = await ac.post("/api/v1/boards", json={"title": title, "content": content})
    assert r.status_code == 201, r.text
    return r.json()


async def _reply_rows(db, board_id: int) -> int:
    result = await db.execute(
        select(func.count()).select_from(Reply).where(Reply.board_id == board_id)
    )
    return result.scalar_one()


# ═══════════════════════════════════════════════════════════
# Create / read
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_create_board(auth_client):
    board = await _create(auth_client)
    assert board["id"] == 1
    assert board["title"] == "A"
    assert board["content"] == "hello"
    assert board["user"]["username"] == "alice"


@pytest.mark.asyncio
async def test_create_board_validation(auth_client):
    r = await auth_client.post("/api/v1/boards", json={"title": "", "content": "x"})
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_list_boards_is_public_and_newest_first(auth_client, client):
    first = await _create(auth_client, title="first")
    second = await _create(auth_client, title="second")

    r = await client.get("/api/v1/boards")
    assert r.status_code == 200
    assert [b["id"] for b in r.json()] == [second["id"], first["id"]]


@pytest.mark.asyncio
async def test_get_board_detail(auth_client, client):
    board = await _create(auth_client)
    await auth_client.post(
        f"/api/v1/boards/{board['id']}/replies", json={"comment": "first!"}
    )

    r = await client.get(f"/api/v1/boards/{board['id']}")
    assert r.status_code == 200
    detail = r.json()
    assert detail["title"] == "A"
    assert [rp["comment"] for rp in detail["replies"]] == ["first!"]


@pytest.mark.asyncio
async def test_get_board_not_found(client):
    r = await client.get("/api/v1/boards/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "Board not found"


# ═══════════════════════════════════════════════════════════
# Update
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_update_board(auth_client):
    board = await _create(auth_client)

    r = await auth_client.put(
        f"/api/v1/boards/{board['id']}",
        json={"title": "B", "content": "world"},
    )
    assert r.status_code == 200
    updated = r.json()
    assert updated["id"] == board["id"]
    assert updated["title"] == "B"
    assert updated["content"] == "world"
    assert updated["user"]["username"] == "alice"


@pytest.mark.asyncio
async def test_update_missing_board(auth_client):
    r = await auth_client.put(
        "/api/v1/boards/999", json={"title": "B", "content": "world"}
    )
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_update_someone_elses_board(auth_client, other_client):
    board = await _create(auth_client)

    r = await other_client.put(
        f"/api/v1/boards/{board['id']}",
        json={"title": "hijack", "content": "mine now"},
    )
    assert r.status_code == 403

    r = await auth_client.get(f"/api/v1/boards/{board['id']}")
    assert r.json()["title"] == "A"


# ═══════════════════════════════════════════════════════════
# Delete
# ═══════════════════════════════════════════════════════════


@pytest.mark.asyncio
async def test_delete_board_cascades_by_default(auth_client, db_session):
    board = await _create(auth_client)
    await auth_client.post(
        f"/api/v1/boards/{board['id']}/replies", json={"comment": "bye"}
    )

    r = await auth_client.delete(f"/api/v1/boards/{board['id']}")
    assert r.status_code == 204

    r = await auth_client.get(f"/api/v1/boards/{board['id']}")
    assert r.status_code == 404
    assert await _reply_rows(db_session, board["id"]) == 0


@pytest.mark.asyncio
async def test_delete_board_bulk_keeps_replies(auth_client, db_session):
    board = await _create(auth_client)
    await auth_client.post(
        f"/api/v1/boards/{board['id']}/replies", json={"comment": "left behind"}
    )

    r = await auth_client.delete(f"/api/v1/boards/{board['id']}?cascade=false")
    assert r.status_code == 204

    r = await auth_client.get(f"/api/v1/boards/{board['id']}")
    assert r.status_code == 404
    assert await _reply_rows(db_session, board["id"]) == 1


@pytest.mark.asyncio
async def test_delete_missing_board(auth_client):
    r = await auth_client.delete("/api/v1/boards/999")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_delete_someone_elses_board(auth_client, other_client):
    board = await _create(auth_client)

    r = await other_client.delete(f"/api/v1/boards/{board['id']}")
    assert r.status_code == 403

    r = await auth_client.get("/api/v1/boards")
    assert len(r.json()) == 1


# ═══════════════════════════════════════════════════════════
# Ids beyond the column range are plain 404s
# ═══════════════════════════════════════════════════════════

TOO_BIG = 2**63


@pytest.mark.asyncio
async def test_huge_id_reads_are_not_found(client):
    r = await client.get(f"/api/v1/boards/{TOO_BIG}")
    assert r.status_code == 404
    r = await client.get(f"/api/v1/boards/{TOO_BIG}/replies")
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_huge_id_writes_are_not_found(auth_client):
    r = await auth_client.put(
        f"/api/v1/boards/{TOO_BIG}", json={"title": "B", "content": "world"}
    )
    assert r.status_code == 404
    r = await auth_client.delete(f"/api/v1/boards/{TOO_BIG}")
    assert r.status_code == 404
    r = await auth_client.delete(f"/api/v1/boards/{TOO_BIG}?cascade=false")
    assert r.status_code == 404
