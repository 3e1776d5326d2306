from sqlalchemy import Boolean, Column, Integer, String
from todoapi.models.base import Base

class Todo(Base):
    __tablename__ = 'todos'
    # AUTOINCREMENT keeps ids monotonic: a deleted id is never handed out again
    __table_args__ = {'sqlite_autoincrement': True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    is_complete = Column(Boolean, nullable=False, default=False)
    secret = Column(String, nullable=True)
