"""Data structures and options shared across the extraction pipeline."""
