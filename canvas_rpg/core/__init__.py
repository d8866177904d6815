"""Core domain model."""
