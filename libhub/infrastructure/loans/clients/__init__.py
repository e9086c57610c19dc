from .catalog_http_client import CatalogHttpClient

__all__ = ["CatalogHttpClient"]
