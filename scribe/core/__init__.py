"""Core infrastructure: config, logging, exceptions, protocols."""
