"""Adapters supplying schema records to the resolution core."""
