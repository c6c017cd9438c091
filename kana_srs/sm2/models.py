"""
SQLAlchemy ORM Models for the progress database

Defines item state, review log, daily aggregate and settings tables.
"""

from sqlalchemy import JSON, BigInteger, Column, Float, Integer, String
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class LearningItemRow(Base):
    """
    Persistent SM-2 state for a single catalog symbol.
    """
    __tablename__ = 'learning_items'

    id = Column(String(64), primary_key=True, nullable=False)
    symbol_id = Column(String(32), nullable=False, index=True)

    # Collection order as last saved
    position = Column(Integer, nullable=False, index=True)

    # SM-2 parameters
    ease_factor = Column(Float, nullable=False)
    interval = Column(Integer, nullable=False)
    repetitions = Column(Integer, nullable=False)

    # Review tracking (epoch ms)
    next_review_at = Column(BigInteger, nullable=False)
    last_review_at = Column(BigInteger, nullable=True)
    lapse_count = Column(Integer, nullable=False, default=0)
    first_learned_at = Column(BigInteger, nullable=True)

    def __repr__(self):
        return f"<LearningItemRow({self.id}, reps={self.repetitions}, interval={self.interval})>"


class ReviewLogRow(Base):
    """
    Log entry for a single submitted review.
    """
    __tablename__ = 'review_log'

    id = Column(Integer, primary_key=True, autoincrement=True)
    item_id = Column(String(64), nullable=False, index=True)
    timestamp = Column(BigInteger, nullable=False, index=True)
    quality = Column(Integer, nullable=False)
    time_spent_ms = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"<ReviewLogRow(id={self.id}, {self.item_id}, quality={self.quality})>"


class SessionAggregateRow(Base):
    """
    Per local calendar day study totals.
    """
    __tablename__ = 'session_aggregates'

    date = Column(String(32), primary_key=True, nullable=False)  # YYYY-MM-DD
    cards_reviewed = Column(Integer, nullable=False, default=0)
    correct_count = Column(Integer, nullable=False, default=0)
    average_time = Column(Float, nullable=False, default=0.0)  # seconds

    def __repr__(self):
        return f"<SessionAggregateRow({self.date}, reviewed={self.cards_reviewed})>"


class SettingsRow(Base):
    """
    Single-row settings document.
    """
    __tablename__ = 'settings'

    id = Column(Integer, primary_key=True)
    payload = Column(JSON, nullable=True)
