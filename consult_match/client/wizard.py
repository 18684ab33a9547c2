# consult_match/client/wizard.py
# 多步驟表單 (Onboarding / 建立案件) 的狀態機
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, Optional, Sequence, Tuple


class WizardError(Exception):
    pass


@dataclass(frozen=True)
class Step:
    name: str
    fields: Tuple[str, ...]
    # 傳入目前累積的表單資料，回傳這一步是否可以繼續
    validate: Callable[[Dict[str, Any]], bool]


class Wizard:
    """
    - step 從 1 開始，到 len(steps) 為止
    - advance(): 目前步驟驗證通過才前進；最後一步則送出 (只送一次)
    - back(): 回上一步，已填的資料保留
    """

    def __init__(
        self,
        steps: Sequence[Step],
        submit: Callable[[Dict[str, Any]], Awaitable[Any]],
        initial: Optional[Dict[str, Any]] = None,
    ):
        if not steps:
            raise WizardError("至少需要一個步驟")
        self.steps = list(steps)
        self.submit = submit
        self.data: Dict[str, Any] = dict(initial or {})
        self.step = 1
        self.submitted = False
        self.result: Any = None

    @property
    def total_steps(self) -> int:
        return len(self.steps)

    @property
    def current_step(self) -> Step:
        return self.steps[self.step - 1]

    @property
    def is_last_step(self) -> bool:
        return self.step == self.total_steps

    @property
    def progress(self) -> int:
        """進度百分比 (顯示用)"""
        return int(self.step * 100 / self.total_steps)

    def update(self, **values: Any) -> None:
        self.data.update(values)

    def can_advance(self) -> bool:
        return bool(self.current_step.validate(self.data))

    def payload(self) -> Dict[str, Any]:
        """只送出各步驟宣告過的欄位"""
        return {
            field: self.data[field]
            for step in self.steps
            for field in step.fields
            if field in self.data
        }

    async def advance(self) -> bool:
        if self.submitted:
            raise WizardError("表單已送出")
        if not self.can_advance():
            return False

        if self.is_last_step:
            # 送出失敗 (例如 ApiError) 時停在最後一步，資料保留可重送
            self.result = await self.submit(self.payload())
            self.submitted = True
            return True

        self.step += 1
        return True

    def back(self) -> None:
        if self.step > 1:
            self.step -= 1
