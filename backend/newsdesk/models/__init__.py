from .user import User
from .category import Category
from .author import Author
from .article import Article

__all__ = ["User", "Category", "Author", "Article"]
