"""
Helper utilities for the suburb property dashboard backend.

This package centralizes reusable helpers for fetching listings from the
upstream API, normalizing them into Property records, computing summary
metrics, producing chart-ready distributions, and generating lightweight
summaries.
"""
