"""
Products table
"""
from sqlalchemy import Boolean, Column, Integer, Numeric, String

from commerce_api.core.database import Base, UTCDateTime


class Product(Base):
    """
    Product catalogue
    """
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String(200), nullable=False, index=True)
    description = Column(String(2000), nullable=False, default="")
    price = Column(Numeric(18, 2), nullable=False)
    category = Column(String(100), nullable=False, index=True)
    stock_quantity = Column(Integer, nullable=False, default=0)

    is_active = Column(Boolean, nullable=False, default=True)

    # Metadata
    created_at = Column(UTCDateTime, nullable=False)
    updated_at = Column(UTCDateTime, nullable=True)

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
