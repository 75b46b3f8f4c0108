# holdings_engine/adapters/__init__.py

"""Adapters between the holdings engine and external systems"""
