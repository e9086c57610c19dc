"""
Errors raised by domain objects and use cases.

Nothing here knows about HTTP. Routers translate the errors they expect
and main.py maps whatever is left by base class.
"""


class DomainError(Exception):
    """Root of every domain error; carries a human message and structured context."""

    def __init__(self, message: str, details: dict[str, object] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}


class ValidationError(DomainError):
    """A value handed to the domain is malformed (blank ISBN, zero copies)."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        context = {"field": field, "value": value}
        super().__init__(message, {k: v for k, v in context.items() if v is not None})
        self.field = field
        self.value = value


class EntityNotFoundError(DomainError):
    def __init__(self, entity_type: str, entity_id: object) -> None:
        super().__init__(
            f"{entity_type} with id {entity_id} not found",
            {"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class BusinessRuleViolationError(DomainError):
    """A request conflicts with data already stored, e.g. a reused ISBN."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Business rule violated: {rule}", {"rule": rule})
        self.rule = rule


class InvariantViolationError(DomainError):
    """
    An aggregate would be left in an impossible state.

    The canonical case is the stock rule 0 <= available <= total on a
    book. Raised before anything is written.
    """

    def __init__(self, aggregate: str, invariant: str) -> None:
        super().__init__(
            f"Invariant violation in {aggregate}: {invariant}",
            {"aggregate": aggregate, "invariant": invariant},
        )
        self.aggregate = aggregate
        self.invariant = invariant
