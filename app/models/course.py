from sqlalchemy import Column, String, Integer
from app.database import Base

# Integer 欄位在 PostgreSQL 是 int4
INT_MIN = -2**31
INT_MAX = 2**31 - 1

class Course(Base):
    __tablename__ = "cursos"

    code = Column(String(20), primary_key=True)

    name = Column(String(255))

    hours = Column(Integer, nullable=False, default=0)
    price = Column(Integer, nullable=False, default=0)

    def __repr__(self):
        return f"Course(code={self.code!r}, name={self.name!r}, hours={self.hours}, price={self.price})"
