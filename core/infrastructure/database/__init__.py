"""Database engine, sessions and the persistence adapter."""
