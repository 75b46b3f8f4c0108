# holdings_engine/core/__init__.py

"""Core domain models and types"""
