"""Scanning, aggregation and the search pipeline."""
