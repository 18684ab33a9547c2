"""Tests for onboarding (role assignment + profile creation)"""

from conftest import ENTREPRENEUR_PROFILE, CONSULTANT_PROFILE


async def test_role_is_null_until_onboarding(client, create_user):
    user = await create_user()
    me = await client.get("/api/auth/user", headers=user.headers)
    assert me.json()["role"] is None


async def test_create_entrepreneur_profile_sets_role(client, create_user):
    user = await create_user()
    response = await client.post("/api/profiles/entrepreneur", json=ENTREPRENEUR_PROFILE, headers=user.headers)
    assert response.status_code == 201
    profile = response.json()
    assert profile["companyName"] == "Padaria Aurora"
    assert profile["country"] == "Brasil"
    assert profile["totalProjects"] == 0

    me = (await client.get("/api/auth/user", headers=user.headers)).json()
    assert me["role"] == "ENTREPRENEUR"
    assert me["profile"]["profileId"] == profile["profileId"]


async def test_role_is_set_only_once(client, create_user):
    user = await create_user()
    await client.post("/api/profiles/consultant", json=CONSULTANT_PROFILE, headers=user.headers)

    again = await client.post("/api/profiles/entrepreneur", json=ENTREPRENEUR_PROFILE, headers=user.headers)
    assert again.status_code == 409

    duplicate = await client.post("/api/profiles/consultant", json=CONSULTANT_PROFILE, headers=user.headers)
    assert duplicate.status_code == 409

    me = (await client.get("/api/auth/user", headers=user.headers)).json()
    assert me["role"] == "CONSULTANT"
    assert me["profile"]["title"] == CONSULTANT_PROFILE["title"]


async def test_invalid_business_stage_is_rejected(client, create_user):
    user = await create_user()
    response = await client.post(
        "/api/profiles/entrepreneur",
        json={**ENTREPRENEUR_PROFILE, "businessStage": "unicorn"},
        headers=user.headers,
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "請求資料格式錯誤"

    me = (await client.get("/api/auth/user", headers=user.headers)).json()
    assert me["role"] is None


async def test_partial_profile_update(client, onboard_entrepreneur):
    user = await onboard_entrepreneur()
    response = await client.put("/api/profiles/entrepreneur", json={"city": "Campinas"}, headers=user.headers)
    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Campinas"
    assert body["companyName"] == ENTREPRENEUR_PROFILE["companyName"]


async def test_update_profile_of_other_type_is_not_found(client, onboard_entrepreneur):
    user = await onboard_entrepreneur()
    response = await client.put("/api/profiles/consultant", json={"bio": "x"}, headers=user.headers)
    assert response.status_code == 404


async def test_profile_creation_requires_session(client):
    response = await client.post("/api/profiles/entrepreneur", json=ENTREPRENEUR_PROFILE)
    assert response.status_code == 401


async def test_explicit_null_on_consultant_profile_is_rejected(client, onboard_consultant):
    consultant = await onboard_consultant()

    for body in ({"isRemote": None}, {"acceptingClients": None}, {"city": None}, {"industries": None}):
        response = await client.put("/api/profiles/consultant", json=body, headers=consultant.headers)
        assert response.status_code == 422, body

    me = await client.get("/api/auth/user", headers=consultant.headers)
    assert me.status_code == 200
    assert me.json()["profile"]["isRemote"] is True

    public = await client.get(f"/api/consultants/{consultant.user_id}")
    assert public.status_code == 200

    search = await client.get("/api/consultants")
    assert search.status_code == 200
    assert [c["userId"] for c in search.json()] == [consultant.user_id]


async def test_explicit_null_on_entrepreneur_profile_is_rejected(client, onboard_entrepreneur):
    user = await onboard_entrepreneur()

    for body in ({"consultationAreas": None}, {"companyName": None}, {"isRemote": None}):
        response = await client.put("/api/profiles/entrepreneur", json=body, headers=user.headers)
        assert response.status_code == 422, body

    cleared = await client.put("/api/profiles/entrepreneur", json={"website": None}, headers=user.headers)
    assert cleared.status_code == 200

    me = (await client.get("/api/auth/user", headers=user.headers)).json()
    assert me["profile"]["consultationAreas"] == ENTREPRENEUR_PROFILE["consultationAreas"]
