"""Database layer"""
from questlog.db.connection import db, Database

__all__ = ["db", "Database"]
