from .document import Document, DocumentNode

__all__ = ["Document", "DocumentNode"]
