"""
Modèle SQLAlchemy pour la table students.
La table est créée à la volée au premier accès (voir services/bootstrap.py),
il n'y a pas de migrations.
"""

from sqlalchemy import Column, Date, Integer, Numeric, String

from app.database import Base


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100))
    last_name = Column(String(100))
    email = Column(String(150))
    major = Column(String(100))
    gpa = Column(Numeric(3, 2))
    status = Column(String(50))
    enrollment_date = Column(Date)
