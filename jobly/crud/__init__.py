"""
CRUD operations (Create, Read, Update, Delete) for companies and jobs.

This layer sits between callers and the database: it builds the statements,
runs them and turns rows into schemas.
"""

from jobly.crud import company, job

__all__ = ["company", "job"]
