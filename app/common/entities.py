from sqlalchemy.orm import DeclarativeBase


class BaseEntity(DeclarativeBase):
    """
    Base model for all entities in the application.
    Every table is registered on this metadata, which `init_db` uses to create the schema.
    """

    __abstract__ = True
