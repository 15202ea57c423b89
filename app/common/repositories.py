from sqlalchemy.orm import Session


class BaseRepository:
    """Base class for all SQLAlchemy backed repositories."""

    def __init__(self, session: Session):
        """
        Every derived “Repository” gets a SQLAlchemy Session injected.
        """
        self.session = session

    def commit(self):
        self.session.commit()

    def rollback(self):
        self.session.rollback()

    def close(self):
        self.session.close()
