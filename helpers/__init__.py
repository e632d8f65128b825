"""Helpers package - pure math shared by services."""
