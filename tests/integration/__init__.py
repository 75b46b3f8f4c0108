# tests/integration/__init__.py

"""Integration tests for holdings_engine

These tests resolve complete backend payloads through the public service,
from raw payload normalization to the ordered result.
"""
