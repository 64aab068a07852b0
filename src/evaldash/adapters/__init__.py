"""Adapters implementing core ports and presentation."""
