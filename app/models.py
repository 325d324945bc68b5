"""
Database models.
"""
from sqlalchemy import Column, Integer, String

from app.database import Base


class User(Base):
    """
    A named entry in the roster. The store assigns the id.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)

    def to_dict(self):
        return {"id": self.id, "name": self.name}

    def __repr__(self):
        return f"<User id={self.id} name={self.name!r}>"
