"""
Scalpel CLI command modules.
"""
