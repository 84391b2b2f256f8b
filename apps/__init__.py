"""Cookie Orders applications."""
