"""
Application layer package.

This package contains use cases, services, and interfaces that implement
the business logic of the application.
"""
