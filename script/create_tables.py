# create_tables.py
from sqlalchemy import inspect

from app.model import topics, questions, question_completions, contests, streaks
from app.database.base_class import Base
from app.database.db import ENGINE, get_ctx_db


Base.metadata.create_all(bind=ENGINE)
print("✅ Tables created.")

with get_ctx_db() as db:
    inspector = inspect(db.connection())
    print("📋 Existing tables:", inspector.get_table_names())
