from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from userauth.core.config import settings
from userauth.core.models import Base


class User(Base):
    """Core application user model.

    The password column holds the value exactly as submitted; it is compared
    verbatim on sign-in.
    """
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    role: Mapped[str] = mapped_column(String(50), nullable=False, default=settings.DEFAULT_ROLE)

    def __repr__(self):
        return f"<User(id='{self.id}', email='{self.email}', role='{self.role}')>"
