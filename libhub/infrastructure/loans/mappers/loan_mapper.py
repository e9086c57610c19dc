"""Mapper for Loan ORM ↔ Domain conversion."""

from libhub.domain.common.value_objects.ids import BookId, LoanId, UserId
from libhub.domain.loans.entities.loan import Loan, LoanStatus
from libhub.models import Loan as LoanORM
from libhub.utils import ensure_utc, ensure_utc_optional


class LoanMapper:
    def to_domain(self, orm_model: LoanORM) -> Loan:
        return Loan.create_with_id(
            id=LoanId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            book_id=BookId(orm_model.book_id),
            status=LoanStatus(orm_model.status),
            checkout_date=ensure_utc(orm_model.checkout_date),
            due_date=ensure_utc(orm_model.due_date),
            return_date=ensure_utc_optional(orm_model.return_date),
        )

    def to_orm(self, domain_entity: Loan, orm_model: LoanORM | None = None) -> LoanORM:
        if orm_model:
            # Only the lifecycle moves after creation
            orm_model.status = domain_entity.status.value
            orm_model.return_date = domain_entity.return_date
            return orm_model

        return LoanORM(
            id=domain_entity.id.value if domain_entity.id.value != 0 else None,
            user_id=domain_entity.user_id.value,
            book_id=domain_entity.book_id.value,
            status=domain_entity.status.value,
            checkout_date=domain_entity.checkout_date,
            due_date=domain_entity.due_date,
            return_date=domain_entity.return_date,
        )
