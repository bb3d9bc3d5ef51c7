"""Database I/O: connection bootstrapping and the table repository."""
