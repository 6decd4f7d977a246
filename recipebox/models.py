from sqlalchemy import Column, String, Text

from .db import Base


class Recipe(Base):
    __tablename__ = "recipes"
    id = Column(String(32), primary_key=True, index=True)
    name = Column(String(200), nullable=True)
    ingredients = Column(Text, nullable=True)  # JSON-encoded list
    steps = Column(Text, nullable=True)
    image = Column(String(2048), nullable=True)
    video_link = Column(String(2048), nullable=True)
