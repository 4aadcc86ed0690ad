"""SQLAlchemy engine, session factory and ORM models."""
