"""Database setup and models for processed schedule screenshots."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, create_engine, select
from sqlalchemy.orm import DeclarativeBase, Session, relationship

from .models import ClassBlock, ScheduleLayout, Weekday


class Base(DeclarativeBase):
    """Base class for all database models."""
    pass


class ScheduleSource(Base):
    """Represents one processed screenshot."""
    __tablename__ = "schedule_sources"

    id = Column(Integer, primary_key=True)
    file_path = Column(String(500), nullable=False)
    processed_at = Column(DateTime, nullable=True)

    blocks = relationship("ExtractedClassBlock", back_populates="source", cascade="all, delete-orphan")


class ExtractedClassBlock(Base):
    """Represents a single class block reconstructed from a screenshot."""
    __tablename__ = "extracted_class_blocks"

    id = Column(Integer, primary_key=True)
    source_id = Column(Integer, ForeignKey("schedule_sources.id"), nullable=False)
    block_id = Column(String(64), nullable=False)
    title = Column(String(200), nullable=False)
    location = Column(String(200), nullable=False, default="")
    instructors = Column(String(500), nullable=True)
    day = Column(String(2), nullable=False)
    start_time = Column(String(5), nullable=False)
    end_time = Column(String(5), nullable=False)
    enabled = Column(Boolean, nullable=False, default=True)
    color_id = Column(String(8), nullable=True)

    source = relationship("ScheduleSource", back_populates="blocks")

    def to_class_block(self) -> ClassBlock:
        return ClassBlock(
            id=self.block_id,
            title=self.title,
            location=self.location or "",
            instructors=self.instructors,
            day_of_week=Weekday(self.day),
            start_time=self.start_time,
            end_time=self.end_time,
            enabled=self.enabled,
            color_id=self.color_id,
        )


def get_db_engine(db_path: str = "schedule_layout.db"):
    """
    Create and return a SQLAlchemy Engine connected to SQLite database.

    Args:
        db_path: Path to the SQLite database file, or ":memory:"

    Returns:
        sqlalchemy.Engine: Database engine instance
    """
    if db_path == ":memory:":
        return create_engine("sqlite://", echo=False)

    full_db_path = Path(db_path).expanduser().resolve()
    full_db_path.parent.mkdir(parents=True, exist_ok=True)
    return create_engine(f"sqlite:///{full_db_path}", echo=False)


def create_tables(engine) -> None:
    """
    Create all database tables defined in Base.metadata.

    Args:
        engine: SQLAlchemy Engine instance
    """
    Base.metadata.create_all(engine)


def save_layout(engine, file_path: str, layout: ScheduleLayout) -> int:
    """
    Persist a layout and its blocks.

    Args:
        engine: SQLAlchemy Engine instance
        file_path: Screenshot the layout was built from
        layout: Result of a layout build

    Returns:
        Id of the new ScheduleSource row
    """
    with Session(engine) as session:
        source = ScheduleSource(file_path=str(file_path), processed_at=datetime.now(timezone.utc))
        for block in layout.class_blocks:
            source.blocks.append(
                ExtractedClassBlock(
                    block_id=block.id,
                    title=block.title,
                    location=block.location,
                    instructors=block.instructors,
                    day=block.day_of_week.value,
                    start_time=block.start_time,
                    end_time=block.end_time,
                    enabled=block.enabled,
                    color_id=block.color_id,
                )
            )
        session.add(source)
        session.commit()
        return source.id


def load_blocks(engine, source_id: int) -> List[ClassBlock]:
    """Load the blocks stored for a screenshot, in insertion order."""
    with Session(engine) as session:
        rows = session.scalars(
            select(ExtractedClassBlock)
            .where(ExtractedClassBlock.source_id == source_id)
            .order_by(ExtractedClassBlock.id)
        ).all()
        return [row.to_class_block() for row in rows]
