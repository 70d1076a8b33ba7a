"""Infrastructure layer: SQLAlchemy engine, sessions and implementations."""
