# consult_match/client/api_client.py
# 前端 / 腳本使用的非同步 API Client (httpx)
import logging
from typing import Any, Dict, List, Optional

import httpx

logger = logging.getLogger(__name__)

LOGIN_URL = "/api/login"
# 401 後導向登入頁前的等待秒數 (讓使用者看到提示)
LOGIN_REDIRECT_DELAY_SECONDS = 2


class ApiError(Exception):
    """非 2xx 回應"""
    def __init__(self, status_code: int, detail: Any):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"{status_code}: {detail}")


class UnauthorizedError(ApiError):
    """
    401：Session 不存在或已過期
    呼叫端應在 redirect_delay 秒後導向 login_url
    """
    def __init__(self, detail: Any = "Unauthorized"):
        super().__init__(401, detail)
        self.login_url = LOGIN_URL
        self.redirect_delay = LOGIN_REDIRECT_DELAY_SECONDS


def _clean_params(params: Dict[str, Any]) -> Dict[str, Any]:
    # 不送出值為 None 的查詢參數
    return {key: value for key, value in params.items() if value is not None}


class ApiClient:
    def __init__(
        self,
        base_url: str,
        session_token: Optional[str] = None,
        cookie_name: str = "session",
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 10.0,
    ):
        cookies = {cookie_name: session_token} if session_token else None
        self._client = httpx.AsyncClient(
            base_url=base_url,
            cookies=cookies,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._client.aclose()

    async def _request(self, method: str, path: str, **kwargs) -> Any:
        response = await self._client.request(method, path, **kwargs)
        logger.debug(f"{method} {path} -> {response.status_code}")

        if response.status_code == 401:
            raise UnauthorizedError(self._detail(response))
        if response.is_error:
            raise ApiError(response.status_code, self._detail(response))
        if response.status_code == 204 or not response.content:
            return None
        return response.json()

    @staticmethod
    def _detail(response: httpx.Response) -> Any:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return body.get("detail", body)
        return body

    # --- Auth ---
    async def get_auth_user(self) -> Dict:
        return await self._request("GET", "/api/auth/user")

    # --- Profiles (Onboarding) ---
    async def create_entrepreneur_profile(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/profiles/entrepreneur", json=data)

    async def create_consultant_profile(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/profiles/consultant", json=data)

    async def update_entrepreneur_profile(self, data: Dict) -> Dict:
        return await self._request("PUT", "/api/profiles/entrepreneur", json=data)

    async def update_consultant_profile(self, data: Dict) -> Dict:
        return await self._request("PUT", "/api/profiles/consultant", json=data)

    # --- Projects ---
    async def create_project(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/projects", json=data)

    async def list_projects(self, limit: Optional[int] = None, offset: Optional[int] = None) -> List[Dict]:
        params = _clean_params({"limit": limit, "offset": offset})
        return await self._request("GET", "/api/projects", params=params)

    async def get_project(self, project_id: str) -> Dict:
        return await self._request("GET", f"/api/projects/{project_id}")

    async def get_my_projects(self) -> List[Dict]:
        return await self._request("GET", "/api/my-projects")

    async def update_project(self, project_id: str, data: Dict) -> Dict:
        return await self._request("PUT", f"/api/projects/{project_id}", json=data)

    # --- Proposals ---
    async def create_proposal(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/proposals", json=data)

    async def get_project_proposals(self, project_id: str) -> List[Dict]:
        return await self._request("GET", f"/api/proposals/project/{project_id}")

    async def get_counter_offers(self, proposal_id: str) -> List[Dict]:
        return await self._request("GET", f"/api/proposals/{proposal_id}/counters")

    async def get_my_proposals(self, proposal_type: str) -> List[Dict]:
        return await self._request("GET", f"/api/my-proposals/{proposal_type}")

    async def update_proposal(self, proposal_id: str, data: Dict) -> Dict:
        return await self._request("PUT", f"/api/proposals/{proposal_id}", json=data)

    # --- Consultants / Portfolio ---
    async def search_consultants(
        self,
        search: Optional[str] = None,
        specialization: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> List[Dict]:
        params = _clean_params({
            "search": search, "specialization": specialization, "limit": limit, "offset": offset
        })
        return await self._request("GET", "/api/consultants", params=params)

    async def get_consultant(self, user_id: str) -> Dict:
        return await self._request("GET", f"/api/consultants/{user_id}")

    async def create_portfolio_item(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/portfolio", json=data)

    async def get_portfolio(self, consultant_id: str) -> List[Dict]:
        return await self._request("GET", f"/api/portfolio/{consultant_id}")

    # --- Messages ---
    async def send_message(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/messages", json=data)

    async def get_conversations(self) -> List[Dict]:
        return await self._request("GET", "/api/conversations")

    async def get_messages(self, partner_id: str, project_id: Optional[str] = None) -> List[Dict]:
        params = _clean_params({"projectId": project_id})
        return await self._request("GET", f"/api/messages/{partner_id}", params=params)

    async def mark_message_read(self, message_id: str) -> Dict:
        return await self._request("PATCH", f"/api/messages/{message_id}/read")

    # --- Favorites ---
    async def add_favorite(self, target_id: str, target_type: str) -> Dict:
        return await self._request(
            "POST", "/api/favorites", json={"targetId": target_id, "targetType": target_type}
        )

    async def remove_favorite(self, target_id: str, target_type: str) -> None:
        await self._request("DELETE", f"/api/favorites/{target_id}/{target_type}")

    async def get_my_favorites(self, target_type: Optional[str] = None) -> List[Dict]:
        return await self._request("GET", "/api/my-favorites", params=_clean_params({"type": target_type}))

    # --- Dashboard / 其他 ---
    async def get_dashboard_stats(self) -> Dict[str, int]:
        return await self._request("GET", "/api/dashboard/stats")

    async def get_specializations(self) -> List[Dict]:
        return await self._request("GET", "/api/specializations")

    async def create_specialization(self, data: Dict) -> Dict:
        return await self._request("POST", "/api/specializations", json=data)

    async def get_notifications(self) -> List[Dict]:
        return await self._request("GET", "/api/notifications")

    async def mark_notification_read(self, notification_id: str) -> Dict:
        return await self._request("PATCH", f"/api/notifications/{notification_id}/read")

    async def get_my_transactions(self) -> List[Dict]:
        return await self._request("GET", "/api/my-transactions")
