# consult_match/client/forms.py
# 三個多步驟表單的定義 (欄位名稱與 API 的 camelCase 一致)
from typing import Any, Dict

from consult_match.client.api_client import ApiClient
from consult_match.client.wizard import Step, Wizard

BUSINESS_STAGES = ("idea", "prototype", "launch", "growth")


def _filled(data: Dict[str, Any], *fields: str) -> bool:
    return all(str(data.get(field) or "").strip() for field in fields)


def _non_empty_list(data: Dict[str, Any], field: str) -> bool:
    return bool(data.get(field))


def _positive_number(data: Dict[str, Any], field: str, allow_missing: bool = False) -> bool:
    value = data.get(field)
    if value in (None, ""):
        return allow_missing
    try:
        return float(value) >= 0
    except (TypeError, ValueError):
        return False


# --- 創業者 Onboarding: 公司 -> 階段 / 地點 -> 諮詢領域 ---
ENTREPRENEUR_STEPS = (
    Step(
        name="company",
        fields=("companyName", "companyDescription", "industry"),
        validate=lambda data: _filled(data, "companyName", "industry"),
    ),
    Step(
        name="stage_location",
        fields=("businessStage", "state", "city", "isRemote"),
        validate=lambda data: data.get("businessStage") in BUSINESS_STAGES and _filled(data, "state", "city"),
    ),
    Step(
        name="consultation_areas",
        fields=("consultationAreas",),
        validate=lambda data: _non_empty_list(data, "consultationAreas"),
    ),
)

# --- 顧問 Onboarding: 專業 -> 地點 / 費率 -> 產業 ---
CONSULTANT_STEPS = (
    Step(
        name="professional",
        fields=("title", "bio", "experience"),
        validate=lambda data: _filled(data, "title", "bio") and _positive_number(data, "experience"),
    ),
    Step(
        name="location_rates",
        fields=("state", "city", "isRemote", "hourlyRate"),
        validate=lambda data: _filled(data, "state", "city")
        and _positive_number(data, "hourlyRate", allow_missing=True),
    ),
    Step(
        name="industries",
        fields=("industries",),
        validate=lambda data: _non_empty_list(data, "industries"),
    ),
)

# --- 建立案件: 基本資料 -> 範圍 / 預算 ---
PROJECT_STEPS = (
    Step(
        name="basics",
        fields=("title", "description"),
        validate=lambda data: _filled(data, "title", "description"),
    ),
    Step(
        name="scope_budget",
        fields=("requirements", "deliverables", "budget", "estimatedHours", "status"),
        validate=lambda data: _positive_number(data, "budget", allow_missing=True)
        and _positive_number(data, "estimatedHours", allow_missing=True),
    ),
)


def entrepreneur_onboarding(client: ApiClient) -> Wizard:
    return Wizard(
        ENTREPRENEUR_STEPS,
        submit=client.create_entrepreneur_profile,
        initial={"isRemote": False, "consultationAreas": []},
    )


def consultant_onboarding(client: ApiClient) -> Wizard:
    return Wizard(
        CONSULTANT_STEPS,
        submit=client.create_consultant_profile,
        initial={"isRemote": True, "industries": []},
    )


def project_creation(client: ApiClient) -> Wizard:
    return Wizard(
        PROJECT_STEPS,
        submit=client.create_project,
        initial={"deliverables": []},
    )


async def save_project(wizard: Wizard, publish: bool = False) -> bool:
    """
    最後一步的兩個按鈕：「儲存草稿」/「儲存並發布」
    """
    wizard.update(status="PUBLISHED" if publish else "DRAFT")
    return await wizard.advance()
