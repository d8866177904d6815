"""Frame-driven runtime and API boundary modules."""
