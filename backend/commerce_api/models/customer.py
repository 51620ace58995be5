"""
Customers table
"""
from sqlalchemy import Boolean, Column, Integer, String

from commerce_api.core.database import Base, UTCDateTime


class Customer(Base):
    """
    Customers

    email carries a UNIQUE index: the database is the final guard against
    two concurrent creates with the same address.
    """
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)

    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    phone = Column(String(20), nullable=True)

    address = Column(String(500), nullable=True)
    city = Column(String(100), nullable=True)
    country = Column(String(100), nullable=True, index=True)

    is_active = Column(Boolean, nullable=False, default=True)

    # Metadata
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Customer id={self.id} email={self.email!r}>"
