# -*- coding: utf-8 -*-
"""
Armazenamento dos registros da aplicação.

``Storage`` é criado explicitamente em ``main.create_app`` e injetado nas
rotas via ``app.state``; cada instância tem seu próprio banco (por padrão um
SQLite em memória), o que permite isolar os testes.

Os repositórios não aplicam regras de negócio: unicidade de e-mail,
referências de agendamento e conflito de horário ficam em ``agenda.services``.
"""

import threading
import uuid
from contextlib import contextmanager
from datetime import date, datetime
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import sessionmaker

from agenda.database import Base, build_engine
from agenda.models.agendamento import Agendamento
from agenda.models.cliente import Cliente
from agenda.models.conta import ContaPagar, ContaReceber
from agenda.models.produto import Produto
from agenda.models.servico import Servico
from agenda.models.usuario import Usuario
from agenda.schemas.agendamento import AgendamentoRead
from agenda.schemas.cliente import ClienteRead
from agenda.schemas.conta import ContaRead
from agenda.schemas.produto import ProdutoRead
from agenda.schemas.servico import ServicoRead
from agenda.schemas.usuario import UsuarioInterno


class Repository:
    """CRUD genérico sobre um modelo, devolvendo schemas de leitura."""

    model = None
    schema = None
    # Entidades com data de criação recebem ``created_at`` no create
    timestamped = False

    def __init__(self, storage: "Storage"):
        self.storage = storage

    def _read(self, obj):
        return self.schema.model_validate(obj)

    def _query(self, db):
        return db.query(self.model).order_by(self.model.seq)

    def _list_where(self, *criteria) -> list:
        with self.storage.session() as db:
            return [self._read(obj) for obj in self._query(db).filter(*criteria).all()]

    def get(self, entity_id: str):
        with self.storage.session() as db:
            obj = db.query(self.model).filter(self.model.id == entity_id).first()
            return self._read(obj) if obj is not None else None

    def list(self) -> list:
        return self._list_where()

    def create(self, payload: Dict[str, Any]):
        dados = dict(payload)
        dados["id"] = str(uuid.uuid4())
        if self.timestamped:
            dados["created_at"] = datetime.now()
        with self.storage.session() as db:
            obj = self.model(**dados)
            db.add(obj)
            db.flush()
            return self._read(obj)

    def update(self, entity_id: str, partial: Dict[str, Any]):
        with self.storage.session() as db:
            obj = db.query(self.model).filter(self.model.id == entity_id).first()
            if obj is None:
                return None
            for key, value in partial.items():
                if key in ("id", "seq", "created_at"):
                    continue
                setattr(obj, key, value)
            db.flush()
            return self._read(obj)

    def delete(self, entity_id: str) -> bool:
        with self.storage.session() as db:
            obj = db.query(self.model).filter(self.model.id == entity_id).first()
            if obj is None:
                return False
            db.delete(obj)
            return True


class UsuarioRepository(Repository):
    model = Usuario
    schema = UsuarioInterno

    def find_by_username(self, username: str) -> Optional[UsuarioInterno]:
        encontrados = self._list_where(Usuario.username == username)
        return encontrados[0] if encontrados else None


class ClienteRepository(Repository):
    model = Cliente
    schema = ClienteRead

    def find_by_email(self, email: str) -> Optional[ClienteRead]:
        encontrados = self._list_where(Cliente.email == email)
        return encontrados[0] if encontrados else None


class ServicoRepository(Repository):
    model = Servico
    schema = ServicoRead

    def list_active(self) -> List[ServicoRead]:
        return self._list_where(Servico.active.is_(True))


class AgendamentoRepository(Repository):
    model = Agendamento
    schema = AgendamentoRead
    timestamped = True

    def list_by_date(self, dia: date) -> List[AgendamentoRead]:
        return self._list_where(Agendamento.date == dia)

    def list_by_client(self, client_id: str) -> List[AgendamentoRead]:
        return self._list_where(Agendamento.client_id == client_id)


class ProdutoRepository(Repository):
    model = Produto
    schema = ProdutoRead
    timestamped = True

    def list_active(self) -> List[ProdutoRead]:
        return self._list_where(Produto.active.is_(True))

    def list_by_category(self, category: str) -> List[ProdutoRead]:
        return self._list_where(Produto.category == category)

    def list_low_stock(self) -> List[ProdutoRead]:
        return self._list_where(Produto.quantity <= Produto.min_quantity)


class ContaRepository(Repository):
    schema = ContaRead
    timestamped = True

    def __init__(self, storage: "Storage", model):
        super().__init__(storage)
        self.model = model

    def list_by_status(self, status: str) -> List[ContaRead]:
        return self._list_where(self.model.status == status)


class Storage:
    """Conjunto de repositórios sobre um único banco de dados."""

    def __init__(self, database_url: str = "sqlite://"):
        self.engine = build_engine(database_url)
        Base.metadata.create_all(bind=self.engine)
        self._session_factory = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )
        # Reentrante: os serviços seguram o lock entre a verificação e a escrita
        self.lock = threading.RLock()

        self.users = UsuarioRepository(self)
        self.clients = ClienteRepository(self)
        self.services = ServicoRepository(self)
        self.appointments = AgendamentoRepository(self)
        self.products = ProdutoRepository(self)
        self.receivables = ContaRepository(self, ContaReceber)
        self.payables = ContaRepository(self, ContaPagar)

    @contextmanager
    def session(self):
        with self.lock:
            db = self._session_factory()
            try:
                yield db
                db.commit()
            except Exception:
                db.rollback()
                raise
            finally:
                db.close()

    def dispose(self) -> None:
        self.engine.dispose()
