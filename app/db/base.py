# Import every model so Base.metadata knows all tables before create_all.
from app.db.session import Base
from app.models import User, Category, Transaction

__all__ = ["Base", "User", "Category", "Transaction"]
