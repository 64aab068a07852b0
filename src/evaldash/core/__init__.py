"""Core domain: records, ports, query, statistics and report models."""
