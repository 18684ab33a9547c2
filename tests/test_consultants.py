"""Tests for consultant search and public profiles"""


async def test_specialization_filter(client, onboard_consultant):
    match = await onboard_consultant(first_name="Gabi", industries=["Gestão", "Marketing"])
    await onboard_consultant(first_name="Hugo", industries=["Gestão"], acceptingClients=False)
    await onboard_consultant(first_name="Iris", industries=["Finanças"])

    results = (await client.get("/api/consultants", params={"specialization": "Gestão"})).json()
    assert [c["userId"] for c in results] == [match.user_id]
    assert results[0]["acceptingClients"] is True
    assert results[0]["user"]["firstName"] == "Gabi"


async def test_specialization_matches_whole_element(client, onboard_consultant):
    await onboard_consultant(industries=["Marketing Digital"])
    results = (await client.get("/api/consultants", params={"specialization": "Marketing"})).json()
    assert results == []


async def test_search_matches_title_and_name(client, onboard_consultant):
    lawyer = await onboard_consultant(first_name="Julia", title="Advogada tributária")
    await onboard_consultant(first_name="Kleber", title="Designer")

    by_title = (await client.get("/api/consultants", params={"search": "TRIBUT"})).json()
    assert [c["userId"] for c in by_title] == [lawyer.user_id]

    by_name = (await client.get("/api/consultants", params={"search": "kleb"})).json()
    assert len(by_name) == 1
    assert by_name[0]["user"]["firstName"] == "Kleber"


async def test_profile_fetch_counts_views(client, onboard_consultant):
    consultant = await onboard_consultant()

    first = (await client.get(f"/api/consultants/{consultant.user_id}")).json()
    second = (await client.get(f"/api/consultants/{consultant.user_id}")).json()
    assert first["profileViews"] == 1
    assert second["profileViews"] == 2
    assert second["totalProjects"] == 0


async def test_unknown_consultant_is_not_found(client):
    response = await client.get("/api/consultants/nobody")
    assert response.status_code == 404


async def test_completed_projects_feed_aggregates(
    client, onboard_entrepreneur, onboard_consultant, publish_project
):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner, budget=5000)
    proposal = (await client.post(
        "/api/proposals",
        json={"projectId": project["projectId"], "message": "Topo", "proposedRate": 100},
        headers=consultant.headers,
    )).json()
    await client.put(f"/api/proposals/{proposal['proposalId']}", json={"status": "ACCEPTED"}, headers=owner.headers)

    done = await client.put(
        f"/api/projects/{project['projectId']}", json={"status": "COMPLETED"}, headers=owner.headers
    )
    assert done.status_code == 200
    assert done.json()["completedAt"] is not None

    profile = (await client.get(f"/api/consultants/{consultant.user_id}")).json()
    assert profile["totalProjects"] == 1
    assert profile["totalEarnings"] == 5000

    owner_profile = (await client.get("/api/auth/user", headers=owner.headers)).json()["profile"]
    assert owner_profile["totalProjects"] == 1
    assert owner_profile["totalSpent"] == 5000

    # 案件狀態變更會通知被指派的顧問
    notifications = (await client.get("/api/notifications", headers=consultant.headers)).json()
    assert "PROJECT_UPDATE" in [n["type"] for n in notifications]


async def test_search_wildcards_are_literal(client, onboard_consultant):
    await onboard_consultant(first_name="Lia", title="Consultora financeira")
    percent = await onboard_consultant(first_name="Mauro", title="Crescimento de 100% em vendas")

    assert (await client.get("/api/consultants", params={"search": "_"})).json() == []

    matches = (await client.get("/api/consultants", params={"search": "%"})).json()
    assert [c["userId"] for c in matches] == [percent.user_id]
