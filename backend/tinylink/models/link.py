from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, DateTime, Index
from ..database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Link(Base):
    """Short code to target URL mapping with click counters"""
    __tablename__ = "links"

    code = Column(String(8), primary_key=True)  # case-sensitive
    target_url = Column(String(2048), nullable=False)
    total_clicks = Column(Integer, nullable=False, default=0, server_default="0")
    last_clicked = Column(DateTime(timezone=True), nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utcnow)

    # Dashboard and API list newest first
    __table_args__ = (
        Index('idx_links_created_at', created_at),
    )

    def __repr__(self):
        return f"<Link {self.code} -> {self.target_url}>"
