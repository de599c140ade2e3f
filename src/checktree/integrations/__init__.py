"""Integrations subpackage for checktree.

Contains the pytest plugin (auto-discovered via the pytest11 entry point).
"""
