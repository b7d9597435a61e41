from sqlalchemy.orm import Session


class BaseRepository:
    """Shares one Session between the table repositories of a unit of work."""

    def __init__(self, db: Session):
        self.db = db

    def flush(self) -> None:
        self.db.flush()

    def commit(self) -> None:
        self.db.commit()

    def rollback(self) -> None:
        self.db.rollback()
