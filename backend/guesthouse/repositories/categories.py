from guesthouse.models.category import Category
from guesthouse.repositories.base import Repository


class CategoryRepository(Repository):
    model = Category
    entity = "Category"
    fields = ("name",)
    required = ("name",)
