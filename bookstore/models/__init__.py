from bookstore.models.author import Author
from bookstore.models.product import Product

__all__ = ["Author", "Product"]
