"""
Infrastructure Layer - Boundary Adapters

This module contains adapters that implement the application ports.

Structure:
- adapters/validation/: Raw form input coercion (pydantic)
"""
