from sqlalchemy import Column, Integer, String, Text, DateTime, func
from flavorfare.db.base import Base

# Largest value an Integer primary key holds on every supported backend (int4)
MAX_RESTAURANT_ID = 2**31 - 1


class Restaurant(Base):
    __tablename__ = "restaurants"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, index=True)
    address = Column(String(255), nullable=True)
    phone_number = Column(String(32), nullable=True)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now(), nullable=False)
    updated_at = Column(DateTime, onupdate=func.now())

    # Never hand out a deleted id again on SQLite
    __table_args__ = {"sqlite_autoincrement": True}

    def __repr__(self) -> str:
        return f"<Restaurant id={self.id} name={self.name!r}>"
