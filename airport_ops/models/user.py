from sqlalchemy import Column, Integer, String
from airport_ops.database import Base


class User(Base):
    __tablename__ = 'users'
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    username = Column(String(100), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)  # argon2 hash
