"""Repository for User domain entities."""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from libhub.domain.common.value_objects.ids import UserId
from libhub.domain.identity.entities.user import User
from libhub.domain.identity.exceptions import EmailAlreadyExistsError, UserNotFoundError
from libhub.infrastructure.identity.mappers.user_mapper import UserMapper
from libhub.models import User as UserORM

logger = logging.getLogger(__name__)


class UserRepository:
    """Repository for User domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = UserMapper()

    def find_by_id(self, user_id: UserId) -> User | None:
        stmt = select(UserORM).where(UserORM.id == user_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_email(self, email: str) -> User | None:
        stmt = select(UserORM).where(UserORM.email == email)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(UserORM)).scalar_one()

    def save(self, user: User) -> User:
        """
        Save a user entity.

        Raises:
            EmailAlreadyExistsError: If email is already registered (for new users)
            UserNotFoundError: If an existing user vanished before the update
        """
        if user.id.value == 0:
            try:
                orm_model = self.mapper.to_orm(user)
                self.db.add(orm_model)
                self.db.commit()
                self.db.refresh(orm_model)
            except IntegrityError as e:
                self.db.rollback()
                if "email" in str(e.orig):
                    raise EmailAlreadyExistsError(user.email) from e
                raise
            logger.info(f"Created user with email: {user.email} (id={orm_model.id})")
            return self.mapper.to_domain(orm_model)

        stmt = select(UserORM).where(UserORM.id == user.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise UserNotFoundError(user.id.value)

        orm_model = self.mapper.to_orm(user, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.info(f"Updated user {user.id.value}")
        return self.mapper.to_domain(orm_model)
