#!/usr/bin/env python3
"""
Blogboard Quickstart — full board lifecycle in one script.

Join → login → write a board → reply → edit → delete (both ways) → logout.
Run with: python examples/quickstart.py

Requires: pip install httpx
Backend must be running: http://localhost:8080 (blogboard serve)
"""

import sys
import uuid

import httpx

BASE = "http://localhost:8080/api/v1"
PASSWORD = "demo-password-123"


def check_backend(client: httpx.Client) -> None:
    """Verify the backend is reachable and the database is up."""
    try:
        resp = client.get("/health")
    except httpx.ConnectError:
        print(f"ERROR: Backend not reachable at {BASE}")
        print("Start it with:  blogboard init-db && blogboard serve --reload")
        sys.exit(1)

    health = resp.json()
    print(f"  Database: {'✓' if health['database'] == 'ok' else '✗'}")
    if health["database"] != "ok":
        sys.exit(1)


def login(client: httpx.Client) -> dict:
    """Join with a fresh username and log in. The client keeps the cookie."""
    username = f"demo_{uuid.uuid4().hex[:8]}"
    resp = client.post(
        "/auth/join",
        json={"username": username, "password": PASSWORD, "email": f"{username}@example.com"},
    )
    assert resp.status_code == 201, f"Join failed: {resp.text}"

    resp = client.post("/auth/login", json={"username": username, "password": PASSWORD})
    assert resp.status_code == 200, f"Login failed: {resp.text}"
    return resp.json()


def main():
    client = httpx.Client(base_url=BASE, timeout=10)

    print("Checking backend health...")
    check_backend(client)

    # ── Writes are gated ─────────────────────────────────────────
    resp = client.post("/boards", json={"title": "nope", "content": "not logged in"})
    print(f"\n0. Anonymous write → {resp.status_code} ({resp.json()['detail']})")

    print("\n1. Joining and logging in...")
    user = login(client)
    print(f"   Logged in as {user['username']} (id={user['id']})")

    print("\n2. Writing a board...")
    resp = client.post("/boards", json={"title": "A", "content": "hello"})
    assert resp.status_code == 201, f"Failed: {resp.text}"
    board = resp.json()
    print(f"   Board #{board['id']}: {board['title']}")

    print("\n3. Replying...")
    resp = client.post(f"/boards/{board['id']}/replies", json={"comment": "first!"})
    assert resp.status_code == 201, f"Failed: {resp.text}"

    print("\n4. Editing...")
    resp = client.put(f"/boards/{board['id']}", json={"title": "B", "content": "world"})
    assert resp.status_code == 200, f"Failed: {resp.text}"
    print(f"   Board #{board['id']} is now: {resp.json()['title']} / {resp.json()['content']}")

    detail = client.get(f"/boards/{board['id']}").json()
    print(f"   Replies: {[r['comment'] for r in detail['replies']]}")

    print("\n5. Deleting through the session (replies cascade)...")
    resp = client.delete(f"/boards/{board['id']}")
    assert resp.status_code == 204, f"Failed: {resp.text}"
    status = client.get(f"/boards/{board['id']}").status_code
    print(f"   GET /boards/{board['id']} → {status}")

    print("\n6. Bulk delete on a board without replies...")
    resp = client.post("/boards", json={"title": "temp", "content": "bulk me"})
    temp_id = resp.json()["id"]
    resp = client.delete(f"/boards/{temp_id}", params={"cascade": "false"})
    assert resp.status_code == 204, f"Failed: {resp.text}"
    print(f"   Board #{temp_id} removed with a single DELETE statement")

    print("\n7. Logging out...")
    client.post("/auth/logout")
    print(f"   GET /auth/me → {client.get('/auth/me').status_code}")

    print("\nDone.")


if __name__ == "__main__":
    main()
