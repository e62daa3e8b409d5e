"""
Connection (match) SQLAlchemy model.
"""

from sqlalchemy import JSON, CheckConstraint, Column, ForeignKey, Index, Integer, String, UniqueConstraint

from .base import BaseModel


class ConnectionModel(BaseModel):
    """Connection database model.

    ``pair_low_id``/``pair_high_id`` hold the ordered user ids so a single
    unique constraint covers both directions of a pair.
    """

    __tablename__ = "matches"

    user1_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    user2_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    pair_low_id = Column(Integer, nullable=False)
    pair_high_id = Column(Integer, nullable=False)
    matched_skills = Column(JSON, nullable=False, default=dict)
    status = Column(String(20), nullable=False, default="pending")  # pending, accepted, declined, expired

    __table_args__ = (
        UniqueConstraint("pair_low_id", "pair_high_id", name="uq_matches_pair"),
        CheckConstraint("user1_id <> user2_id", name="ck_matches_distinct_users"),
        CheckConstraint("pair_low_id < pair_high_id", name="ck_matches_pair_order"),
        Index("idx_matches_user1_status", "user1_id", "status"),
        Index("idx_matches_user2_status", "user2_id", "status"),
    )

    def __repr__(self) -> str:
        return (
            f"<Connection(id={self.id}, user1_id={self.user1_id}, "
            f"user2_id={self.user2_id}, status={self.status})>"
        )
