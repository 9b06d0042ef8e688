from sqlalchemy import BigInteger, Column, DateTime, Float, Integer, String

from base import Base

# BIGINT ids on PostgreSQL; SQLite only autoincrements an INTEGER primary key.
Id = BigInteger().with_variant(Integer, 'sqlite')


class User(Base):
    __tablename__ = 'users'

    id = Column(Id, primary_key=True, autoincrement=True)
    username = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, index=True)
    # Stored verbatim; login compares it with plain equality.
    password = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False, default='')
    rating = Column(Float, nullable=False, default=0.0)
    rating_count = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, username='{self.username}', email='{self.email}')>"
