"""Core domain layer for neo-adi."""
