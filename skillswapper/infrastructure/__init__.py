"""
Infrastructure layer package.

This package contains database access, email delivery, security and
monitoring implementations.
"""
