from sqlalchemy import Column, Integer, String, Text
from sqlalchemy.orm import relationship
from guesthouse.database import Base

class Client(Base):
    __tablename__ = "clients"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    contact_info = Column(Text)  # free text: email, phone, ...

    # Relationships
    bookings = relationship("Booking", back_populates="client")
