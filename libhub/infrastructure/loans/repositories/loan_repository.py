"""Repository for Loan domain entities."""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from libhub.domain.common.value_objects.ids import LoanId, UserId
from libhub.domain.loans.entities.loan import Loan
from libhub.domain.loans.exceptions import LoanNotFoundError
from libhub.infrastructure.loans.mappers.loan_mapper import LoanMapper
from libhub.models import Loan as LoanORM

logger = logging.getLogger(__name__)


class LoanRepository:
    """
    Repository for Loan persistence.

    Every save commits on its own: the borrowing coordinator relies on a
    PENDING loan being durable before inventory is touched.
    """

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = LoanMapper()

    def find_by_id(self, loan_id: LoanId) -> Loan | None:
        stmt = select(LoanORM).where(LoanORM.id == loan_id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_user_id(self, user_id: UserId) -> list[Loan]:
        stmt = (
            select(LoanORM)
            .where(LoanORM.user_id == user_id.value)
            .order_by(LoanORM.checkout_date.desc(), LoanORM.id.desc())
        )
        orm_models = self.db.execute(stmt).scalars().all()
        return [self.mapper.to_domain(m) for m in orm_models]

    def save(self, loan: Loan) -> Loan:
        if loan.id.value == 0:
            orm_model = self.mapper.to_orm(loan)
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
            logger.debug(f"Created loan {orm_model.id} for book {loan.book_id.value}")
            return self.mapper.to_domain(orm_model)

        stmt = select(LoanORM).where(LoanORM.id == loan.id.value)
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        if not orm_model:
            raise LoanNotFoundError(loan.id.value)

        self.mapper.to_orm(loan, orm_model)
        self.db.commit()
        self.db.refresh(orm_model)
        logger.debug(f"Loan {loan.id.value} is now {loan.status.value}")
        return self.mapper.to_domain(orm_model)
