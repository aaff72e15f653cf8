from simplybooks.models.author import Author
from simplybooks.models.book import Book

__all__ = ["Author", "Book"]
