"""
Presentation Layer - CLI interface.

This module contains the user-facing interface that interacts with
the application layer through use cases.

Structure:
- cli/: Command-line interface
"""
