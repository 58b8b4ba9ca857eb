from guesthouse.models.room import Room
from guesthouse.repositories.base import Repository


class RoomRepository(Repository):
    model = Room
    entity = "Room"
    fields = ("room_number", "type", "price_per_night", "status")
    required = ("room_number", "type", "price_per_night")
    defaults = {"status": "Available"}
