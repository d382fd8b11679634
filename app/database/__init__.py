from app.database.db import get_db, get_ctx_db, SessionLocal

__all__ = ["get_db", "get_ctx_db", "SessionLocal"]
