"""Features of neo-adi."""
