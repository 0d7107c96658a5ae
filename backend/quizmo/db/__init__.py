"""
Database connection modules.

- prisma_client: Prisma ORM client (PostgreSQL, schema in backend/prisma/)
"""

from quizmo.db.prisma_client import get_prisma, connect_db, disconnect_db

__all__ = ["get_prisma", "connect_db", "disconnect_db"]
