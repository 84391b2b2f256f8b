"""Infrastructure layer - database, security and logging."""
