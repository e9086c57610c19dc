from libhub.application.catalog.use_cases.inventory_use_case import InventoryUseCase
from libhub.domain.common.value_objects.ids import BookId


class LocalCatalogAdapter:
    """Catalog port served by the catalog use cases running in this process."""

    def __init__(self, inventory_use_case: InventoryUseCase) -> None:
        self.inventory_use_case = inventory_use_case

    def is_book_available(self, book_id: BookId) -> bool:
        return self.inventory_use_case.check_availability(book_id.value)

    def update_book_stock(self, book_id: BookId, change_amount: int) -> None:
        self.inventory_use_case.update_stock(book_id.value, change_amount)
