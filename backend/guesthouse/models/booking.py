from sqlalchemy import Column, Integer, String, Date, ForeignKey, Numeric
from sqlalchemy.orm import relationship
from guesthouse.database import Base

class Booking(Base):
    __tablename__ = "bookings"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    check_in_date = Column(Date, nullable=False)
    check_out_date = Column(Date, nullable=False)  # not checked against check_in_date
    total_price = Column(Numeric(12, 2), nullable=False)
    status = Column(String(50), default="Confirmed")  # free text, e.g. "Completed"

    # References are not checked on write; the join view shows dangling ones
    room_id = Column(Integer, ForeignKey("rooms.id"), nullable=False)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False)

    # Relationships
    room = relationship("Room", back_populates="bookings")
    client = relationship("Client", back_populates="bookings")
