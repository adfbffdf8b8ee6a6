"""Infrastructure helpers: logging, filesystem and git."""
