"""City weather relay service."""
