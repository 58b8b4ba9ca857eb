from guesthouse.models.category import Category
from guesthouse.models.inventory import InventoryItem
from guesthouse.models.room import Room
from guesthouse.models.client import Client
from guesthouse.models.booking import Booking
