"""Core configuration, logging, exceptions and record types."""
