from sqlalchemy import BigInteger, Column, DateTime, Float, String, Text

from base import Base
from models.user import Id


class Post(Base):
    __tablename__ = 'posts'

    id = Column(Id, primary_key=True, autoincrement=True)
    # No foreign key: posts.user_id is not checked against users.
    user_id = Column(BigInteger, nullable=False, index=True)
    type = Column(String(50), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default='')
    lat = Column(Float, nullable=False)
    lng = Column(Float, nullable=False)
    contact = Column(String(255), nullable=False, default='')
    status = Column(String(20), nullable=False, default='active')
    created_at = Column(DateTime(timezone=True), nullable=False)

    def __repr__(self):
        return f"<Post(id={self.id}, title='{self.title}', type='{self.type}', user_id={self.user_id})>"
