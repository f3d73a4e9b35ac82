from sqlalchemy import Column, Integer, String
from agenda.database import Base

class Usuario(Base):
    __tablename__ = "usuarios"

    # seq mantém a ordem de inserção; id é o identificador público (UUID)
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String(36), unique=True, index=True, nullable=False)

    username = Column(String(50), index=True, nullable=False)
    password = Column(String(255), nullable=False)
