from .book_mapper import BookMapper

__all__ = ["BookMapper"]
