from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from guesthouse.database import Base

class Category(Base):
    __tablename__ = "categories"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)

    # Relationships
    inventory_items = relationship("InventoryItem", back_populates="category")
