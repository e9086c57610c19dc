"""Infrastructure layer: persistence, adapters and HTTP routers."""
