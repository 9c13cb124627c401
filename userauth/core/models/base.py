from sqlalchemy.orm import DeclarativeBase


# -----------------------------------------------------------
# Base Configuration (required for SQLAlchemy 2.0)
# -----------------------------------------------------------
class Base(DeclarativeBase):
    """Base class which every ORM model inherits from.

    Its metadata is what the database manager uses to create the schema.
    """
    pass
