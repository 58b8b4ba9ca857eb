from sqlalchemy import Column, Integer, String, Numeric
from sqlalchemy.orm import relationship
from guesthouse.database import Base

class Room(Base):
    __tablename__ = "rooms"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    room_number = Column(String(20), nullable=False)  # not unique
    type = Column(String(50), nullable=False)  # e.g., "Standard", "Deluxe", "Suite"
    price_per_night = Column(Numeric(12, 2), nullable=False)
    status = Column(String(50), default="Available")  # free text, e.g. "Occupied"

    # Relationships
    bookings = relationship("Booking", back_populates="room")
