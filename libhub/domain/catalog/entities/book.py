from dataclasses import dataclass
from datetime import UTC, datetime

from libhub.domain.catalog.exceptions import OutOfStockError, OverCapacityError
from libhub.domain.catalog.value_objects.stock_level import StockLevel
from libhub.domain.common.entity import Entity
from libhub.domain.common.exceptions import InvariantViolationError, ValidationError
from libhub.domain.common.value_objects.ids import BookId

# Domain constraints
MAX_ISBN_LENGTH = 13


@dataclass(eq=False)
class Book(Entity[BookId]):
    """
    Book aggregate root.

    Owns the copy counters of a title in the catalog.

    Business Rules:
    - ISBN, title and author cannot be blank
    - Total copies must be positive
    - 0 <= available_copies <= total_copies after every mutation
    - Copies on loan survive a restock: only the shelf count moves
    """

    # Identity
    id: BookId

    # Essential metadata
    isbn: str
    title: str
    author: str

    # Inventory
    total_copies: int
    available_copies: int

    # Timestamps
    created_at: datetime
    updated_at: datetime | None = None

    # Optional fields
    genre: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.isbn or not self.isbn.strip():
            raise ValidationError("ISBN cannot be empty", field="isbn", value=self.isbn)
        if len(self.isbn) > MAX_ISBN_LENGTH:
            raise ValidationError(
                f"ISBN cannot exceed {MAX_ISBN_LENGTH} characters", field="isbn", value=self.isbn
            )
        self._validate_details(self.title, self.author)
        if self.total_copies <= 0:
            raise ValidationError(
                "Total copies must be greater than zero",
                field="total_copies",
                value=self.total_copies,
            )
        self._check_stock_invariant()

    # Query methods
    def is_available(self) -> bool:
        """Check if at least one copy is on the shelf."""
        return self.available_copies > 0

    @property
    def copies_on_loan(self) -> int:
        return self.total_copies - self.available_copies

    def stock_level(self) -> StockLevel:
        """Snapshot of the copy counters."""
        return StockLevel(
            book_id=self.id,
            available_copies=self.available_copies,
            total_copies=self.total_copies,
        )

    # Command methods
    def decrement_stock(self) -> None:
        """
        Take one copy off the shelf.

        Raises:
            OutOfStockError: If no copy is available
        """
        self.adjust_stock(-1)

    def increment_stock(self) -> None:
        """
        Put one copy back on the shelf.

        Raises:
            OverCapacityError: If every copy is already on the shelf
        """
        self.adjust_stock(1)

    def adjust_stock(self, change_amount: int) -> None:
        """
        Apply a signed change to the available copies, all or nothing.

        Args:
            change_amount: Negative takes copies, positive releases them

        Raises:
            OutOfStockError: If fewer than abs(change_amount) copies are available
            OverCapacityError: If the release would exceed total copies
        """
        if change_amount == 0:
            return
        new_available = self.available_copies + change_amount
        if new_available < 0:
            raise OutOfStockError(self.id.value)
        if new_available > self.total_copies:
            raise OverCapacityError(self.id.value)
        self.available_copies = new_available
        self._touch()

    def restock(self, total_copies: int) -> None:
        """
        Change the number of copies the library owns.

        Copies currently on loan stay on loan; the shelf count absorbs
        the difference.

        Raises:
            ValidationError: If total_copies is not positive
            InvariantViolationError: If fewer copies than are on loan would remain
        """
        if total_copies <= 0:
            raise ValidationError(
                "Total copies must be greater than zero", field="total_copies", value=total_copies
            )
        on_loan = self.copies_on_loan
        if total_copies < on_loan:
            raise InvariantViolationError(
                "Book",
                f"cannot restock to {total_copies} copies while {on_loan} are on loan",
            )
        self.total_copies = total_copies
        self.available_copies = total_copies - on_loan
        self._touch()

    def update_details(
        self,
        title: str,
        author: str,
        genre: str | None = None,
        description: str | None = None,
    ) -> None:
        """
        Replace the descriptive metadata.

        Raises:
            ValidationError: If title or author is blank
        """
        self._validate_details(title, author)
        self.title = title.strip()
        self.author = author.strip()
        self.genre = genre
        self.description = description
        self._touch()

    def _touch(self) -> None:
        self.updated_at = datetime.now(UTC)

    def _check_stock_invariant(self) -> None:
        if not 0 <= self.available_copies <= self.total_copies:
            raise InvariantViolationError(
                "Book",
                f"available copies ({self.available_copies}) must be between 0 "
                f"and total copies ({self.total_copies})",
            )

    @staticmethod
    def _validate_details(title: str, author: str) -> None:
        if not title or not title.strip():
            raise ValidationError("Title cannot be empty", field="title", value=title)
        if not author or not author.strip():
            raise ValidationError("Author cannot be empty", field="author", value=author)

    # Factory methods
    @classmethod
    def create(
        cls,
        isbn: str,
        title: str,
        author: str,
        total_copies: int,
        genre: str | None = None,
        description: str | None = None,
    ) -> "Book":
        """Factory for a new catalog entry; every copy starts on the shelf."""
        return cls(
            id=BookId.generate(),
            isbn=isbn.strip() if isbn else isbn,
            title=title.strip() if title else title,
            author=author.strip() if author else author,
            total_copies=total_copies,
            available_copies=total_copies,
            created_at=datetime.now(UTC),
            updated_at=None,
            genre=genre,
            description=description,
        )

    @classmethod
    def create_with_id(
        cls,
        id: BookId,
        isbn: str,
        title: str,
        author: str,
        total_copies: int,
        available_copies: int,
        created_at: datetime,
        updated_at: datetime | None = None,
        genre: str | None = None,
        description: str | None = None,
    ) -> "Book":
        """Factory for reconstituting book from persistence."""
        return cls(
            id=id,
            isbn=isbn,
            title=title,
            author=author,
            total_copies=total_copies,
            available_copies=available_copies,
            created_at=created_at,
            updated_at=updated_at,
            genre=genre,
            description=description,
        )
