"""
Job Database Model

SQLAlchemy model for the jobs table.
"""

from decimal import Decimal
from typing import Optional

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly.core.database import Base


class Job(Base):
    """
    Job posting model.

    (title, company_handle) is only checked for duplicates before insert;
    there is no unique constraint on it.
    """

    __tablename__ = "jobs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    salary: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    equity: Mapped[Optional[Decimal]] = mapped_column(Numeric, nullable=True)
    company_handle: Mapped[str] = mapped_column(
        String(25),
        ForeignKey("companies.handle", ondelete="CASCADE"),
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint("salary >= 0", name="ck_job_salary_positive"),
        CheckConstraint("equity <= 1.0", name="ck_job_equity_max"),
        Index("idx_job_company_handle", "company_handle"),
    )

    def __repr__(self) -> str:
        return f"<Job(id={self.id}, title='{self.title}', company_handle='{self.company_handle}')>"
