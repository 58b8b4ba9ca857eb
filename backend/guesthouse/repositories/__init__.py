from guesthouse.repositories.base import Repository
from guesthouse.repositories.inventory import InventoryRepository
from guesthouse.repositories.rooms import RoomRepository
from guesthouse.repositories.clients import ClientRepository
from guesthouse.repositories.categories import CategoryRepository
from guesthouse.repositories.bookings import BookingRepository, PLACEHOLDER
