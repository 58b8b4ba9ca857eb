from guesthouse.models.client import Client
from guesthouse.repositories.base import Repository


class ClientRepository(Repository):
    model = Client
    entity = "Client"
    fields = ("name", "contact_info")
    required = ("name",)
