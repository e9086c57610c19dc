from .local_catalog_adapter import LocalCatalogAdapter

__all__ = ["LocalCatalogAdapter"]
