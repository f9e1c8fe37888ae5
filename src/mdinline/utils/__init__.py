"""Utility modules for mdinline."""
