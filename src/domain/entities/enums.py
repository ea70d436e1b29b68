"""
Template Manager Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class UserRole(str, Enum):
    """Authorization tier of a user account"""

    read = "read"
    read_write = "read-write"
    admin = "admin"
