import logging
from typing import List, Optional

from fastapi import Depends
from sqlalchemy import desc, insert, or_
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..core.exceptions import DuplicateCode, NotFound, StoreError
from ..database import get_db
from ..models import Link
from ..models.link import utcnow

logger = logging.getLogger(__name__)


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class LinkStore:
    """
    Persistent code to URL mappings.

    Every mutation is a single statement followed by a commit. Duplicate
    codes are detected from the primary key constraint, and clicks are
    counted with an in-database increment, so no application locking is
    needed between concurrent requests.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, code: Optional[str] = None) -> StoreError:
        logger.exception("Store error during %s (code=%s)", operation, code)
        self.db.rollback()
        return StoreError()

    def create(self, code: str, url: str) -> Link:
        values = {
            "code": code,
            "target_url": url,
            "total_clicks": 0,
            "last_clicked": None,
            "created_at": utcnow(),
        }
        try:
            self.db.execute(insert(Link).values(**values))
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateCode()
        except SQLAlchemyError:
            raise self._fail("create", code)

        # Returned from the inserted values, not re-read
        return Link(**values)

    def get(self, code: str) -> Link:
        try:
            link = self.db.query(Link).filter(Link.code == code).first()
        except SQLAlchemyError:
            raise self._fail("get", code)

        if link is None:
            raise NotFound()
        return link

    def list_query(self, search: Optional[str] = None):
        query = self.db.query(Link)

        if search:
            # ILIKE on PostgreSQL; SQLite folds ASCII letters only
            pattern = f"%{_escape_like(search)}%"
            query = query.filter(
                or_(
                    Link.code.ilike(pattern, escape="\\"),
                    Link.target_url.ilike(pattern, escape="\\"),
                )
            )

        return query.order_by(desc(Link.created_at))

    def list(self, search: Optional[str] = None) -> List[Link]:
        """All links, newest first, optionally filtered by a case-insensitive substring."""
        try:
            return self.list_query(search).all()
        except SQLAlchemyError:
            raise self._fail("list")

    def record_click(self, code: str) -> None:
        # Increment and timestamp in one UPDATE so concurrent clicks are never lost
        try:
            updated = self.db.query(Link).filter(Link.code == code).update(
                {
                    Link.total_clicks: Link.total_clicks + 1,
                    Link.last_clicked: utcnow(),
                },
                synchronize_session=False,
            )
            self.db.commit()
        except SQLAlchemyError:
            raise self._fail("record_click", code)

        if updated == 0:
            raise NotFound()

    def delete(self, code: str) -> None:
        try:
            deleted = self.db.query(Link).filter(Link.code == code).delete(
                synchronize_session=False
            )
            self.db.commit()
        except SQLAlchemyError:
            raise self._fail("delete", code)

        if deleted == 0:
            raise NotFound()


# Dependency to get a store bound to the request session
def get_store(db: Session = Depends(get_db)) -> LinkStore:
    return LinkStore(db)
