# consult_match/client/filters.py
# 列表頁的前端篩選與統計 (資料為 API 回傳的 camelCase dict)
from collections import Counter
from typing import Dict, List, Optional


def _contains(value: Optional[str], query: str) -> bool:
    return query in (value or "").lower()


def filter_projects(projects: List[Dict], query: str = "", status: Optional[str] = None) -> List[Dict]:
    """
    標題或描述包含關鍵字 (不分大小寫)，可再依狀態篩選
    """
    query = query.strip().lower()
    return [
        project for project in projects
        if (not query or _contains(project.get("title"), query) or _contains(project.get("description"), query))
        and (status is None or project.get("status") == status)
    ]


def filter_conversations(conversations: List[Dict], query: str = "") -> List[Dict]:
    """
    依對話對象姓名或最後一則訊息內容篩選
    """
    query = query.strip().lower()
    if not query:
        return list(conversations)

    results = []
    for conversation in conversations:
        partner = conversation.get("partner") or {}
        name = f"{partner.get('firstName') or ''} {partner.get('lastName') or ''}"
        last_message = (conversation.get("lastMessage") or {}).get("content")
        if _contains(name, query) or _contains(last_message, query):
            results.append(conversation)
    return results


def count_by_status(items: List[Dict]) -> Dict[str, int]:
    return dict(Counter(item.get("status") for item in items))


def summarize_proposals(proposals: List[Dict]) -> Dict[str, int]:
    """
    - accepted: ACCEPTED
    - pending: SENT + VIEWED
    - negotiating: COUNTER_OFFERED
    """
    counts = count_by_status(proposals)
    return {
        "total": len(proposals),
        "accepted": counts.get("ACCEPTED", 0),
        "pending": counts.get("SENT", 0) + counts.get("VIEWED", 0),
        "negotiating": counts.get("COUNTER_OFFERED", 0),
    }
