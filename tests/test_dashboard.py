"""Tests for dashboard stats, portfolio, specializations and the transaction ledger"""

from decimal import Decimal

from consult_match.models.transaction import Transaction, TransactionTypeEnum
from consult_match.models.user import UserRoleEnum
from consult_match.repositories.transaction_repo import TransactionRepository


async def test_entrepreneur_stats(client, onboard_entrepreneur, onboard_consultant, publish_project):
    owner = await onboard_entrepreneur()
    consultant = await onboard_consultant()
    project = await publish_project(owner)
    await publish_project(owner, title="Rascunho", status="DRAFT")
    await client.post(
        "/api/proposals",
        json={"projectId": project["projectId"], "message": "Oi", "proposedRate": 80},
        headers=consultant.headers,
    )
    await client.post(
        "/api/favorites",
        json={"targetId": consultant.profile["profileId"], "targetType": "consultant"},
        headers=owner.headers,
    )

    stats = (await client.get("/api/dashboard/stats", headers=owner.headers)).json()
    assert stats == {"activeProjects": 1, "totalProposals": 1, "favoriteConsultants": 1}

    consultant_stats = (await client.get("/api/dashboard/stats", headers=consultant.headers)).json()
    assert consultant_stats == {"activeProjects": 0, "sentProposals": 1}


async def test_stats_without_profile(client, create_user):
    user = await create_user()
    response = await client.get("/api/dashboard/stats", headers=user.headers)
    assert response.status_code == 200
    assert response.json() == {}


async def test_portfolio_lists_public_items(client, onboard_consultant, onboard_entrepreneur):
    consultant = await onboard_consultant()
    entrepreneur = await onboard_entrepreneur()

    public = await client.post(
        "/api/portfolio",
        json={"title": "Rebranding", "description": "Nova marca", "tags": ["branding"]},
        headers=consultant.headers,
    )
    assert public.status_code == 201
    await client.post(
        "/api/portfolio",
        json={"title": "Confidencial", "description": "NDA", "isPublic": False},
        headers=consultant.headers,
    )

    forbidden = await client.post(
        "/api/portfolio", json={"title": "x", "description": "y"}, headers=entrepreneur.headers
    )
    assert forbidden.status_code == 403

    items = (await client.get(f"/api/portfolio/{consultant.profile['profileId']}")).json()
    assert [item["title"] for item in items] == ["Rebranding"]


async def test_specializations_admin_only(client, create_user, onboard_consultant):
    admin = await create_user(role=UserRoleEnum.admin)
    consultant = await onboard_consultant()
    body = {"name": "Gestão Financeira", "category": "Finanças"}

    forbidden = await client.post("/api/specializations", json=body, headers=consultant.headers)
    assert forbidden.status_code == 403

    created = await client.post("/api/specializations", json=body, headers=admin.headers)
    assert created.status_code == 201
    assert created.json()["isActive"] is True

    duplicate = await client.post("/api/specializations", json=body, headers=admin.headers)
    assert duplicate.status_code == 409

    listed = (await client.get("/api/specializations")).json()
    assert [s["name"] for s in listed] == ["Gestão Financeira"]


async def test_my_transactions(client, db_session, create_user):
    user = await create_user()
    other = await create_user()
    repo = TransactionRepository(db_session)
    created = await repo.create_transaction(
        Transaction(
            user_id=user.user_id,
            type=TransactionTypeEnum.subscription,
            amount=Decimal("49.90"),
            fee=Decimal("0"),
            net_amount=Decimal("49.90"),
            extra_metadata={"plan": "pro"},
        )
    )
    assert created.transaction_id
    await repo.create_transaction(
        Transaction(
            user_id=other.user_id,
            type=TransactionTypeEnum.refund,
            amount=Decimal("10"),
            net_amount=Decimal("10"),
        )
    )

    ledger = (await client.get("/api/my-transactions", headers=user.headers)).json()
    assert len(ledger) == 1
    assert ledger[0]["type"] == "SUBSCRIPTION"
    assert ledger[0]["status"] == "PENDING"
    assert ledger[0]["netAmount"] == 49.9
    assert ledger[0]["metadata"] == {"plan": "pro"}
