"""Database Metadata — the declarative Base shared by every ORM model."""
