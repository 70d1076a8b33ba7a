"""Domain layer: contracts and value objects with no SQLAlchemy dependency."""
