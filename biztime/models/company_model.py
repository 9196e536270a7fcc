from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from biztime.core.db import Base


class Company(Base):
    __tablename__ = "companies"

    code = Column(String, primary_key=True)
    name = Column(String, nullable=False, unique=True)
    description = Column(Text, nullable=True)

    # Insertion counter for the list view; never serialized.
    # Assigned inside the INSERT by company_service.create_company.
    # Rows written outside the API leave it NULL and list after the rest.
    position = Column(Integer, nullable=True, unique=True)

    # Relationship: one-to-many (companies → invoices).
    # Deleting a company deletes its invoices (FK is ON DELETE CASCADE).
    invoices = relationship(
        "Invoice",
        back_populates="company",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Invoice.id",
    )
