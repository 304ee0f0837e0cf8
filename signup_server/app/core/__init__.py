"""Configuration and logging for the Signup Server."""
