from sqlalchemy import (
    Boolean,
    Column,
    Date,
    Float,
    ForeignKey,
    Integer,
    String,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import false, func
from biztime.core.db import Base


class Invoice(Base):
    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True, autoincrement=True)

    # Set once at creation; the API has no way to move an invoice
    comp_code = Column(
        String,
        ForeignKey("companies.code", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    amt = Column(Float, nullable=False)

    # --- Payment status ---
    paid = Column(Boolean, nullable=False, default=False, server_default=false())
    paid_date = Column(Date, nullable=True)

    # --- Timestamps (store-assigned) ---
    add_date = Column(Date, nullable=False, server_default=func.current_date())

    # Relationship back to the company
    company = relationship("Company", back_populates="invoices")
