"""Core infrastructure: errors, results, configuration and logging."""
