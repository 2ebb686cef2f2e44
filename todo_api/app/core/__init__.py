"""Core infrastructure: settings, logging, database and error handling."""
