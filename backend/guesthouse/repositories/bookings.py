"""Room bookings and the joined view shown on the bookings screen.

The joined view uses LEFT OUTER JOINs: a booking whose room or client has been
deleted is still listed, with ``PLACEHOLDER`` in the display fields of the
missing side.
"""

import logging
from datetime import date
from typing import List

from guesthouse.errors import ValidationError
from guesthouse.models.booking import Booking
from guesthouse.models.client import Client
from guesthouse.models.room import Room
from guesthouse.repositories.base import Repository, storage_errors

logger = logging.getLogger(__name__)

PLACEHOLDER = "N/A"


class BookingRepository(Repository):
    model = Booking
    entity = "Booking"
    fields = ("room_id", "client_id", "check_in_date", "check_out_date", "total_price", "status")
    required = ("room_id", "client_id", "check_in_date", "check_out_date", "total_price")
    defaults = {"status": "Confirmed"}

    def validate(self, fields: dict) -> dict:
        values = super().validate(fields)
        for name in ("check_in_date", "check_out_date"):
            if isinstance(values[name], str):
                try:
                    values[name] = date.fromisoformat(values[name])
                except ValueError:
                    raise ValidationError(f"{name} must be a date in YYYY-MM-DD format")
        return values

    def _detailed_query(self):
        return (
            self.db.query(Booking, Room, Client)
            .outerjoin(Room, Booking.room_id == Room.id)
            .outerjoin(Client, Booking.client_id == Client.id)
        )

    def to_detailed_dict(self, booking, room, client) -> dict:
        record = self.to_dict(booking)
        if room is None:
            logger.debug("Booking %s references missing room %s", booking.id, booking.room_id)
        if client is None:
            logger.debug("Booking %s references missing client %s", booking.id, booking.client_id)
        record.update(
            room_number=room.room_number if room is not None else PLACEHOLDER,
            room_type=room.type if room is not None else PLACEHOLDER,
            client_name=client.name if client is not None else PLACEHOLDER,
            client_contact_info=client.contact_info if client is not None else PLACEHOLDER,
        )
        return record

    def list_detailed(self) -> List[dict]:
        with storage_errors(self.db, "listing detailed bookings"):
            rows = self._detailed_query().order_by(Booking.id).all()
        return [self.to_detailed_dict(*row) for row in rows]

    def get_detailed(self, booking_id: int) -> dict:
        with storage_errors(self.db, f"loading detailed booking {booking_id}"):
            row = self._detailed_query().filter(Booking.id == booking_id).first()
        if row is None:
            raise self._not_found(booking_id)
        return self.to_detailed_dict(*row)
