# consult_match/repositories/user_repo.py
# 負責與使用者相關的資料庫操作
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from consult_match.core.database import utcnow
from consult_match.models.user import User, UserRoleEnum

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_id(self, user_id: str) -> User | None:
        """
        透過 user_id 查詢使用者
        """
        stmt = select(User).where(User.user_id == user_id)
        result = await self.db.execute(stmt)
        return result.scalars().first()

    async def upsert_user(self, user_data: dict) -> User:
        """
        依 user_id 新增或合併使用者 (身分提供者登入時呼叫)
        只覆寫 user_data 中有的欄位
        """
        user = await self.get_user_by_id(user_data["user_id"])
        if user is None:
            user = User(**user_data)
            self.db.add(user)
        else:
            for key, value in user_data.items():
                setattr(user, key, value)
            user.updated_at = utcnow()

        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def update_user(self, user: User) -> User:
        await self.db.commit()
        await self.db.refresh(user)
        return user

    async def set_role(self, user: User, role: UserRoleEnum) -> User:
        """
        (注意) 不 commit，由呼叫端與 Profile 新增一起提交
        """
        user.role = role
        user.updated_at = utcnow()
        await self.db.flush()
        return user
