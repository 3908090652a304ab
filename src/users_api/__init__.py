"""
Users API - layered CRUD backend for user records
"""

__version__ = "1.0.0"
