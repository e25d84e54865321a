"""Utility functions and helpers.

This module contains:
- errors: exception types mapped to HTTP statuses by the app
"""
