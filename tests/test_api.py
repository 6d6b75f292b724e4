async def test_health(client):
    resp = await client.get("/health")
    assert resp.status == 200
    assert (await resp.json())["status"] == "ok"


async def test_post_like_toggle_end_to_end(client, login):
    alice_id, alice = await login("alice")
    bob_id, bob = await login("bobby")

    resp = await client.post("/api/posts", json={"content": "Hello", "type": "text"}, headers=alice)
    assert resp.status == 201
    post = await resp.json()

    resp = await client.get("/api/posts")
    feed = await resp.json()
    assert len(feed) == 1
    assert feed[0]["author"]["id"] == alice_id
    assert feed[0]["content"] == "Hello"
    assert feed[0]["likes"] == 0
    assert feed[0]["comments"] == []

    resp = await client.post(f"/api/posts/{post['id']}/like", headers=bob)
    assert (await resp.json()) == {"post_id": post["id"], "liked": True, "likes": 1}

    resp = await client.get(f"/api/posts/{post['id']}", headers=bob)
    body = await resp.json()
    assert body["likes"] == 1
    assert body["has_liked"] is True

    resp = await client.post(f"/api/posts/{post['id']}/like", headers=bob)
    assert (await resp.json())["likes"] == 0


async def test_connect_and_accept_end_to_end(client, login):
    alice_id, alice = await login("alice")
    bob_id, bob = await login("bobby")

    resp = await client.post("/api/connections/connect", json={"user_id": bob_id}, headers=alice)
    assert resp.status == 201
    connection = await resp.json()
    assert connection["status"] == "pending"
    assert connection["receiver_id"] == bob_id

    resp = await client.get("/api/connections/pending", headers=bob)
    assert [c["id"] for c in await resp.json()] == [connection["id"]]

    resp = await client.post(f"/api/connections/{connection['id']}/accept", headers=alice)
    assert resp.status == 403

    resp = await client.post(f"/api/connections/{connection['id']}/accept", headers=bob)
    assert (await resp.json())["status"] == "accepted"

    for headers, other_id in ((alice, bob_id), (bob, alice_id)):
        resp = await client.get("/api/connections", headers=headers)
        network = await resp.json()
        assert [c["user"]["id"] for c in network] == [other_id]

    resp = await client.post("/api/connections/connect", json={"user_id": alice_id}, headers=bob)
    assert resp.status == 409


async def test_connections_feed_scope(client, login):
    alice_id, alice = await login("alice")
    _, bob = await login("bobby")
    await client.post("/api/posts", json={"content": "mine"}, headers=alice)
    await client.post("/api/posts", json={"content": "not a peer"}, headers=bob)

    resp = await client.get("/api/posts?scope=connections")
    assert resp.status == 401

    resp = await client.get("/api/posts?scope=connections", headers=alice)
    assert await resp.json() == []

    resp = await client.get("/api/posts?scope=everyone")
    assert resp.status == 400


async def test_writes_need_authentication(client):
    resp = await client.post("/api/posts", json={"content": "anon"})
    assert resp.status == 401
    assert (await resp.json())["message"] == "Authentication required"

    resp = await client.get("/api/users/me", headers={"Authorization": "Bearer not-a-token"})
    assert resp.status == 401


async def test_bad_input_is_400(client, login):
    _, alice = await login("alice")

    resp = await client.get("/api/posts/abc")
    assert resp.status == 400
    assert (await resp.json())["message"] == "Invalid post ID"

    resp = await client.post("/api/posts", data="{not json", headers=alice)
    assert resp.status == 400

    resp = await client.post("/api/posts", json={"content": ""}, headers=alice)
    assert resp.status == 400
    assert (await resp.json())["message"].startswith("Validation error")

    resp = await client.get("/api/posts?filter=bloopers")
    assert resp.status == 400

    resp = await client.post("/api/auth/register", json={
        "username": "carol", "password": "secret123", "confirm_password": "different",
    })
    assert resp.status == 400


async def test_missing_resources_are_404(client):
    for path in ("/api/posts/999", "/api/users/999", "/api/events/1", "/api/opportunities/1"):
        resp = await client.get(path)
        assert resp.status == 404, path


async def test_comments_over_http(client, login):
    _, alice = await login("alice")
    resp = await client.post("/api/posts", json={"content": "Hello"}, headers=alice)
    post_id = (await resp.json())["id"]

    resp = await client.post(f"/api/posts/{post_id}/comments", json={"content": "Nice"}, headers=alice)
    assert resp.status == 201

    resp = await client.get(f"/api/posts/{post_id}/comments")
    comments = await resp.json()
    assert [c["content"] for c in comments] == ["Nice"]
    assert comments[0]["author"]["username"] == "alice"


async def test_share_over_http(client, login):
    _, alice = await login("alice", full_name="Alice Striker")
    _, bob = await login("bobby")
    resp = await client.post("/api/posts", json={"content": "Hat-trick"}, headers=alice)
    post_id = (await resp.json())["id"]

    resp = await client.post(f"/api/posts/{post_id}/share", json={}, headers=bob)
    assert resp.status == 201
    shared = await resp.json()
    assert shared["type"] == "shared"
    assert shared["original_author_name"] == "Alice Striker"

    resp = await client.get("/api/posts?filter=shared")
    assert [p["id"] for p in await resp.json()] == [shared["id"]]


async def test_profile_and_search(client, login):
    alice_id, alice = await login("alice")
    _, bob = await login("bobby")

    resp = await client.get("/api/users/me", headers=alice)
    assert (await resp.json())["id"] == alice_id

    resp = await client.patch(f"/api/users/{alice_id}", json={"club": "Ajax"}, headers=bob)
    assert resp.status == 403

    resp = await client.patch(f"/api/users/{alice_id}", json={"club": "Ajax"}, headers=alice)
    assert (await resp.json())["club"] == "Ajax"

    resp = await client.get("/api/users/search?q=ajax")
    assert [u["username"] for u in await resp.json()] == ["alice"]

    resp = await client.get(f"/api/scouting-insights/{alice_id}")
    assert (await resp.json())["profile_views"] >= 20


async def test_suggestions_over_http(client, login):
    alice_id, alice = await login("alice")
    bob_id, _ = await login("bobby")

    resp = await client.get("/api/connections/suggested", headers=alice)
    suggestions = await resp.json()
    assert suggestions == [{"user": suggestions[0]["user"]}]
    assert suggestions[0]["user"]["id"] == bob_id

    resp = await client.get(f"/api/connections/suggested/{bob_id}")
    assert [s["user"]["id"] for s in await resp.json()] == [alice_id]


async def test_listings(client, login):
    _, alice = await login("alice")

    resp = await client.post("/api/opportunities", json={
        "title": "Youth Academy Trials", "club": "FC Barcelona",
        "location": "Barcelona, Spain", "category": "football",
    }, headers=alice)
    assert resp.status == 201

    resp = await client.get("/api/opportunities?category=training")
    assert await resp.json() == []
    resp = await client.get("/api/opportunities?category=football")
    assert len(await resp.json()) == 1

    later = {"title": "Expo", "description": "Clubs and scouts", "date": "2030-06-01T10:00:00Z",
             "location": "London, UK", "type": "networking"}
    sooner = dict(later, title="Showcase", date="2030-05-01T10:00:00Z", type="trial")
    for event in (later, sooner):
        resp = await client.post("/api/events", json=event, headers=alice)
        assert resp.status == 201

    resp = await client.get("/api/events")
    assert [e["title"] for e in await resp.json()] == ["Showcase", "Expo"]
    resp = await client.get("/api/events?type=networking")
    assert [e["title"] for e in await resp.json()] == ["Expo"]

    resp = await client.post("/api/events", json=later)
    assert resp.status == 401


async def test_messages_over_http(client, login):
    alice_id, alice = await login("alice")
    bob_id, bob = await login("bobby")

    resp = await client.post("/api/messages", json={"receiver_id": bob_id, "content": "Hi"}, headers=alice)
    assert resp.status == 201
    message = await resp.json()

    resp = await client.get("/api/messages/conversations", headers=bob)
    conversations = await resp.json()
    assert conversations[0]["user"]["id"] == alice_id
    assert conversations[0]["unread"] == 1

    resp = await client.post(f"/api/messages/{message['id']}/read", headers=bob)
    assert resp.status == 200

    resp = await client.get(f"/api/messages/with/{alice_id}", headers=bob)
    thread = await resp.json()
    assert thread[0]["read"] is True


async def test_logout_invalidates_token(client, login):
    _, alice = await login("alice")

    resp = await client.post("/api/auth/logout", headers=alice)
    assert resp.status == 200

    resp = await client.get("/api/users/me", headers=alice)
    assert resp.status == 401


async def test_events_mix_naive_and_aware_dates(client, login):
    _, alice = await login("alice")
    base = {"description": "Clubs and scouts", "location": "London, UK", "type": "networking"}

    resp = await client.post("/api/events", json=dict(base, title="Aware", date="2030-06-01T10:00:00Z"), headers=alice)
    assert resp.status == 201
    resp = await client.post("/api/events", json=dict(base, title="Naive", date="2030-07-01T10:00:00"), headers=alice)
    assert resp.status == 201
    assert (await resp.json())["date"].startswith("2030-07-01T10:00:00")

    resp = await client.get("/api/events")
    assert resp.status == 200
    assert [e["title"] for e in await resp.json()] == ["Aware", "Naive"]


async def test_opening_thread_clears_unread(client, login):
    alice_id, alice = await login("alice")
    bob_id, bob = await login("bobby")
    for text in ("one", "two"):
        await client.post("/api/messages", json={"receiver_id": bob_id, "content": text}, headers=alice)
    await client.post("/api/messages", json={"receiver_id": alice_id, "content": "reply"}, headers=bob)

    resp = await client.get("/api/messages/conversations", headers=bob)
    assert (await resp.json())[0]["unread"] == 2

    resp = await client.get(f"/api/messages/with/{alice_id}", headers=bob)
    assert all(m["read"] for m in await resp.json() if m["receiver_id"] == bob_id)

    resp = await client.get("/api/messages/conversations", headers=bob)
    assert (await resp.json())[0]["unread"] == 0
    # bob's own reply stays unread for alice
    resp = await client.get("/api/messages/conversations", headers=alice)
    assert (await resp.json())[0]["unread"] == 1


async def test_session_store_failure_degrades_to_anonymous(client, login, container, monkeypatch):
    _, alice = await login("alice")

    async def broken(*args, **kwargs):
        raise RuntimeError("session store is down")

    monkeypatch.setattr(container.repos.sessions, "get", broken)

    resp = await client.get("/api/posts", headers=alice)
    assert resp.status == 200

    resp = await client.post("/api/posts", json={"content": "Hello"}, headers=alice)
    assert resp.status == 401
