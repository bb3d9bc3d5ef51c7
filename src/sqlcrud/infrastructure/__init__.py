"""Infrastructure: SQL generation and schema records."""
