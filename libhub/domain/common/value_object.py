"""Base class for immutable values compared by content (StockLevel, ids)."""


class ValueObject:
    """
    Subclasses are @dataclass(frozen=True) and validate in __post_init__.

    Equality is by attribute values and by concrete type, so
    StockLevel(BookId(1), 1, 2) equals another snapshot with the same
    counters while a BookId never equals a LoanId of the same number.
    """

    def __eq__(self, other: object) -> bool:
        return type(other) is type(self) and self.__dict__ == other.__dict__

    def __hash__(self) -> int:
        return hash((type(self), tuple(self.__dict__.values())))

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in self.__dict__.items())
        return f"{type(self).__name__}({attrs})"
