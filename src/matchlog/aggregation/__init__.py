"""Aggregation module for match summaries.

Pure computation over match entities; never touches storage.
"""
