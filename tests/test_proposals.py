"""Tests for proposals, counter-offers and acceptance"""

from sqlalchemy import delete

from consult_match.models.entrepreneur_profile import EntrepreneurProfile


def proposal_body(project_id: str, **fields) -> dict:
    return {"projectId": project_id, "message": "Posso ajudar", "proposedRate": 120, **fields}


async def test_receiver_is_project_owner(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)

    response = await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers)
    assert response.status_code == 201
    proposal = response.json()
    assert proposal["senderId"] == consultant.user_id
    assert proposal["receiverId"] == owner.user_id
    assert proposal["status"] == "SENT"


async def test_sent_and_received_are_disjoint(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers)

    sent = (await client.get("/api/my-proposals/sent", headers=consultant.headers)).json()
    received = (await client.get("/api/my-proposals/received", headers=consultant.headers)).json()
    assert len(sent) == 1
    assert received == []
    assert sent[0]["project"]["title"] == project["title"]

    owner_received = (await client.get("/api/my-proposals/received", headers=owner.headers)).json()
    owner_sent = (await client.get("/api/my-proposals/sent", headers=owner.headers)).json()
    assert [p["proposalId"] for p in owner_received] == [sent[0]["proposalId"]]
    assert owner_sent == []


async def test_unknown_proposal_type_is_rejected(client, onboard_consultant):
    consultant = await onboard_consultant()
    response = await client.get("/api/my-proposals/archived", headers=consultant.headers)
    assert response.status_code == 400


async def test_missing_entrepreneur_profile_creates_nothing(
    client, db_session, onboard_entrepreneur, onboard_consultant, publish_project
):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)

    await db_session.execute(
        delete(EntrepreneurProfile).where(EntrepreneurProfile.profile_id == owner.profile["profileId"])
    )
    await db_session.commit()

    response = await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers)
    assert response.status_code == 404

    proposals = (await client.get(f"/api/proposals/project/{project['projectId']}")).json()
    assert proposals == []


async def test_unknown_project_is_not_found(client, onboard_consultant):
    consultant = await onboard_consultant()
    response = await client.post("/api/proposals", json=proposal_body("missing"), headers=consultant.headers)
    assert response.status_code == 404


async def test_draft_project_does_not_accept_proposals(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner, status="DRAFT")

    response = await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers)
    assert response.status_code == 400


async def test_only_consultants_send_initial_proposals(client, onboard_entrepreneur, publish_project):
    owner = await onboard_entrepreneur()
    other = await onboard_entrepreneur(first_name="Dario")
    project = await publish_project(owner)

    response = await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=other.headers)
    assert response.status_code == 403


async def test_counter_offer_chain(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    original = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    # 只有接收方可以還價
    forbidden = await client.post(
        "/api/proposals",
        json=proposal_body(project["projectId"], parentId=original["proposalId"], proposedRate=90),
        headers=consultant.headers,
    )
    assert forbidden.status_code == 403

    response = await client.post(
        "/api/proposals",
        json=proposal_body(project["projectId"], parentId=original["proposalId"], proposedRate=90),
        headers=owner.headers,
    )
    assert response.status_code == 201
    counter = response.json()
    assert counter["parentId"] == original["proposalId"]
    assert counter["receiverId"] == consultant.user_id
    assert counter["status"] == "SENT"

    proposals = {p["proposalId"]: p for p in (await client.get(f"/api/proposals/project/{project['projectId']}")).json()}
    assert proposals[original["proposalId"]]["status"] == "COUNTER_OFFERED"
    assert proposals[original["proposalId"]]["respondedAt"] is not None

    counters = (await client.get(f"/api/proposals/{original['proposalId']}/counters", headers=consultant.headers)).json()
    assert [c["proposalId"] for c in counters] == [counter["proposalId"]]


async def test_accept_assigns_consultant(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    # 發送方不能自己接受
    forbidden = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"status": "ACCEPTED"}, headers=consultant.headers
    )
    assert forbidden.status_code == 403

    response = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"status": "ACCEPTED"}, headers=owner.headers
    )
    assert response.status_code == 200
    accepted = response.json()
    assert accepted["status"] == "ACCEPTED"
    assert accepted["viewedAt"] is not None
    assert accepted["respondedAt"] is not None

    updated = (await client.get(f"/api/projects/{project['projectId']}")).json()
    assert updated["status"] == "IN_PROGRESS"
    assert updated["consultantId"] == consultant.profile["profileId"]

    assigned = (await client.get("/api/my-projects", headers=consultant.headers)).json()
    assert [p["projectId"] for p in assigned] == [project["projectId"]]

    # 已接受的提案不能再改狀態
    again = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"status": "DECLINED"}, headers=owner.headers
    )
    assert again.status_code == 400


async def test_sender_edits_pending_proposal(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    response = await client.put(
        f"/api/proposals/{proposal['proposalId']}",
        json={"message": "Nova proposta", "proposedRate": 100},
        headers=consultant.headers,
    )
    assert response.status_code == 200
    assert response.json()["message"] == "Nova proposta"
    assert response.json()["proposedRate"] == 100

    receiver_edit = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"message": "x"}, headers=owner.headers
    )
    assert receiver_edit.status_code == 403


async def test_counter_offered_status_cannot_be_set_directly(
    client, onboard_entrepreneur, onboard_consultant, publish_project
):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    response = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"status": "COUNTER_OFFERED"}, headers=owner.headers
    )
    assert response.status_code == 400


async def test_new_proposal_notifies_owner(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    await client.post("/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers)

    notifications = (await client.get("/api/notifications", headers=owner.headers)).json()
    assert [n["type"] for n in notifications] == ["PROPOSAL"]
    assert notifications[0]["data"]["projectId"] == project["projectId"]


async def test_sender_expires_sent_proposal(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    response = await client.put(
        f"/api/proposals/{proposal['proposalId']}", json={"status": "EXPIRED"}, headers=consultant.headers
    )
    assert response.status_code == 200
    expired = response.json()
    assert expired["status"] == "EXPIRED"
    assert expired["viewedAt"] is None
    assert expired["respondedAt"] is not None


async def test_receiver_expires_viewed_proposal(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()
    url = f"/api/proposals/{proposal['proposalId']}"

    viewed = await client.put(url, json={"status": "VIEWED"}, headers=owner.headers)
    assert viewed.status_code == 200
    assert viewed.json()["viewedAt"] is not None

    response = await client.put(url, json={"status": "EXPIRED"}, headers=owner.headers)
    assert response.status_code == 200
    assert response.json()["status"] == "EXPIRED"

    # 已過期的提案不能再接受
    accept = await client.put(url, json={"status": "ACCEPTED"}, headers=owner.headers)
    assert accept.status_code == 400


async def test_explicit_null_on_proposal_is_rejected(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    proposal = (await client.post(
        "/api/proposals", json=proposal_body(project["projectId"]), headers=consultant.headers
    )).json()

    for body in ({"message": None}, {"proposedRate": None}):
        response = await client.put(
            f"/api/proposals/{proposal['proposalId']}", json=body, headers=consultant.headers
        )
        assert response.status_code == 422, body

    listed = (await client.get(f"/api/proposals/project/{project['projectId']}")).json()
    assert listed[0]["message"] == "Posso ajudar"
