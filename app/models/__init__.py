from .user import User
from .category import Category
from .transaction import Transaction

__all__ = ["User", "Category", "Transaction"]
