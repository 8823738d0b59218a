"""
Company Database Model

SQLAlchemy model for the companies table.
"""

from typing import Optional

from sqlalchemy import CheckConstraint, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jobly.core.database import Base


class Company(Base):
    """
    Company model.

    Companies are keyed by a short, unique handle and own zero or more jobs.
    """

    __tablename__ = "companies"

    handle: Mapped[str] = mapped_column(String(25), primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False, unique=True)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    num_employees: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    logo_url: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    __table_args__ = (
        CheckConstraint("num_employees >= 0", name="ck_company_num_employees_positive"),
    )

    def __repr__(self) -> str:
        return f"<Company(handle='{self.handle}', name='{self.name}')>"
