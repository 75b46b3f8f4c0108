# holdings_engine/shared/__init__.py

"""Shared utilities"""
