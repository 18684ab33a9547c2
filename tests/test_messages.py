"""Tests for direct messages and conversation summaries"""


async def send(client, sender, receiver, content: str, **fields) -> dict:
    response = await client.post(
        "/api/messages",
        json={"receiverId": receiver.user_id, "content": content, **fields},
        headers=sender.headers,
    )
    assert response.status_code == 201, response.text
    return response.json()


async def test_message_round_trip_is_unread(client, create_user):
    alice = await create_user(first_name="Alice")
    bob = await create_user(first_name="Bob")

    sent = await send(client, alice, bob, "Olá!")
    assert sent["senderId"] == alice.user_id
    assert sent["isRead"] is False

    history = (await client.get(f"/api/messages/{alice.user_id}", headers=bob.headers)).json()
    assert [m["messageId"] for m in history] == [sent["messageId"]]
    assert history[0]["isRead"] is False


async def test_history_is_oldest_first(client, create_user):
    alice = await create_user()
    bob = await create_user()
    first = await send(client, alice, bob, "1")
    second = await send(client, bob, alice, "2")

    history = (await client.get(f"/api/messages/{bob.user_id}", headers=alice.headers)).json()
    assert [m["messageId"] for m in history] == [first["messageId"], second["messageId"]]


async def test_cannot_message_self(client, create_user):
    alice = await create_user()
    response = await client.post(
        "/api/messages", json={"receiverId": alice.user_id, "content": "eu"}, headers=alice.headers
    )
    assert response.status_code == 400


async def test_unknown_receiver_is_not_found(client, create_user):
    alice = await create_user()
    response = await client.post(
        "/api/messages", json={"receiverId": "nobody", "content": "oi"}, headers=alice.headers
    )
    assert response.status_code == 404


async def test_only_receiver_marks_read(client, create_user):
    alice = await create_user()
    bob = await create_user()
    message = await send(client, alice, bob, "Olá")

    forbidden = await client.patch(f"/api/messages/{message['messageId']}/read", headers=alice.headers)
    assert forbidden.status_code == 403

    response = await client.patch(f"/api/messages/{message['messageId']}/read", headers=bob.headers)
    assert response.status_code == 200
    assert response.json()["isRead"] is True
    assert response.json()["readAt"] is not None


async def test_conversations_group_by_partner(client, create_user):
    me = await create_user(first_name="Eu")
    p1 = await create_user(first_name="Paula")
    p2 = await create_user(first_name="Pedro")

    # P1: 2 則訊息，1 則未讀；P2: 1 則訊息，已讀
    await send(client, p1, me, "Oi, tudo bem?")
    last_p1 = await send(client, me, p1, "Tudo ótimo")
    from_p2 = await send(client, p2, me, "Reunião amanhã")
    await client.patch(f"/api/messages/{from_p2['messageId']}/read", headers=me.headers)

    conversations = (await client.get("/api/conversations", headers=me.headers)).json()
    assert len(conversations) == 2

    by_partner = {c["partnerId"]: c for c in conversations}
    assert by_partner[p1.user_id]["lastMessage"]["messageId"] == last_p1["messageId"]
    assert by_partner[p1.user_id]["unreadCount"] == 1
    assert by_partner[p1.user_id]["partner"]["firstName"] == "Paula"
    assert by_partner[p2.user_id]["lastMessage"]["messageId"] == from_p2["messageId"]
    assert by_partner[p2.user_id]["unreadCount"] == 0


async def test_project_messages_form_separate_conversation(
    client, onboard_entrepreneur, onboard_consultant, publish_project
):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)

    await send(client, consultant, owner, "Oi")
    await send(client, consultant, owner, "Sobre o projeto", projectId=project["projectId"])

    conversations = (await client.get("/api/conversations", headers=owner.headers)).json()
    assert sorted(c["projectId"] or "" for c in conversations) == ["", project["projectId"]]

    scoped = (await client.get(
        f"/api/messages/{consultant.user_id}",
        params={"projectId": project["projectId"]},
        headers=owner.headers,
    )).json()
    assert [m["content"] for m in scoped] == ["Sobre o projeto"]


async def test_message_notifies_receiver(client, create_user):
    alice = await create_user(first_name="Alice")
    bob = await create_user()
    await send(client, alice, bob, "Olá")

    notifications = (await client.get("/api/notifications", headers=bob.headers)).json()
    assert len(notifications) == 1
    assert notifications[0]["type"] == "MESSAGE"
    assert notifications[0]["isRead"] is False

    marked = await client.patch(
        f"/api/notifications/{notifications[0]['notificationId']}/read", headers=bob.headers
    )
    assert marked.status_code == 200
    assert marked.json()["isRead"] is True

    forbidden = await client.patch(
        f"/api/notifications/{notifications[0]['notificationId']}/read", headers=alice.headers
    )
    assert forbidden.status_code == 403
