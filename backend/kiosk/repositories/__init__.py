"""
Repository Layer - Data Access

Two interchangeable backends implement one contract (`Repository`):
- orm: SQLAlchemy sessions, specs compiled to SQL
- sql: psycopg2 statements, specs evaluated in memory

Services depend only on the contract.
"""
from kiosk.repositories.base import Repository, prepare_new

__all__ = [
    'Repository',
    'prepare_new',
]
