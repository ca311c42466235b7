# File: app/models/user.py

"""
User model.

Only the table is guaranteed to exist; no route reads or writes rows yet.
"""

from sqlalchemy import Integer, LargeBinary, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    email: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)

    # Password hash, never the plain text
    password: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)
