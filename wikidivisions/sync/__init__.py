"""Pipelines producing the result tables."""
