"""Configuration loading, path policy and runtime constants."""
