"""Tests for client-side list filtering and counters"""

from consult_match.client.filters import (
    count_by_status, filter_conversations, filter_projects, summarize_proposals
)

PROJECTS = [
    {"projectId": "1", "title": "Plano de Marketing", "description": "Redes sociais", "status": "PUBLISHED"},
    {"projectId": "2", "title": "Site institucional", "description": "Landing page de MARKETING", "status": "DRAFT"},
    {"projectId": "3", "title": "Contabilidade", "description": None, "status": "PUBLISHED"},
]


def test_filter_projects_by_query():
    assert [p["projectId"] for p in filter_projects(PROJECTS, "marketing")] == ["1", "2"]


def test_filter_projects_by_query_and_status():
    assert [p["projectId"] for p in filter_projects(PROJECTS, "marketing", status="DRAFT")] == ["2"]


def test_empty_query_returns_all():
    assert filter_projects(PROJECTS, "  ") == PROJECTS


def test_filter_conversations():
    conversations = [
        {"partner": {"firstName": "Paula", "lastName": "Reis"}, "lastMessage": {"content": "Oi"}},
        {"partner": {"firstName": "Pedro", "lastName": None}, "lastMessage": {"content": "Proposta enviada"}},
        {"partner": None, "lastMessage": {"content": "x"}},
    ]
    assert len(filter_conversations(conversations, "reis")) == 1
    assert filter_conversations(conversations, "PROPOSTA")[0]["partner"]["firstName"] == "Pedro"
    assert len(filter_conversations(conversations)) == 3


def test_count_by_status():
    assert count_by_status(PROJECTS) == {"PUBLISHED": 2, "DRAFT": 1}


def test_summarize_proposals():
    proposals = [{"status": s} for s in ("SENT", "VIEWED", "ACCEPTED", "COUNTER_OFFERED", "DECLINED")]
    assert summarize_proposals(proposals) == {
        "total": 5, "accepted": 1, "pending": 2, "negotiating": 1,
    }
