from decimal import Decimal

from sqlalchemy import Column, Integer, String, Date, Numeric

from database.db import Base


class Movie(Base):
    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(60), nullable=False, index=True)
    genre = Column(String(30), nullable=False, index=True)

    release_date = Column(Date)
    price = Column(Numeric(18, 2))
    rating = Column(String(5))

    def to_dict(self):
        """JSON-safe representation"""
        return {
            'id': self.id,
            'title': self.title,
            'genre': self.genre,
            'release_date': self.release_date.isoformat() if self.release_date else None,
            'price': float(self.price) if isinstance(self.price, Decimal) else self.price,
            'rating': self.rating,
        }

    def __repr__(self):
        return f"<Movie id={self.id} title={self.title!r} genre={self.genre!r}>"
