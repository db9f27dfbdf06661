"""
Stores em memória para os registros da API.

Cada store é uma coleção ordenada protegida por lock, indexada pelo id.
Os ids vêm de um contador crescente, então nunca são reaproveitados
depois de uma remoção. Os dados se perdem quando o processo reinicia.
"""
import threading
from collections import OrderedDict
from datetime import datetime
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from pydantic import BaseModel

Record = TypeVar("Record", bound=BaseModel)


class RecordStore(Generic[Record]):
    def __init__(self):
        self._lock = threading.Lock()
        self._records: "OrderedDict[int, Record]" = OrderedDict()
        self._next_id = 1

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def list(self) -> List[Record]:
        """Retorna cópias de todos os registros, em ordem de inserção"""
        with self._lock:
            return [r.model_copy() for r in self._records.values()]

    def get(self, record_id: int) -> Optional[Record]:
        with self._lock:
            record = self._records.get(record_id)
            return record.model_copy() if record is not None else None

    def add(self, record: Record, unique: Optional[Callable[[Record], bool]] = None) -> Optional[Record]:
        """
        Atribui id e data de criação e guarda o registro.

        Se `unique` for informado e algum registro existente satisfizer o
        predicado, nada é inserido e retorna None. A checagem e a inserção
        acontecem sob o mesmo lock.
        """
        with self._lock:
            if unique is not None and any(unique(r) for r in self._records.values()):
                return None
            stored = record.model_copy(update={"id": self._next_id, "created": datetime.now()})
            self._records[stored.id] = stored
            self._next_id += 1
            return stored.model_copy()

    def update(self, record_id: int, fields: Dict[str, object]) -> Optional[Record]:
        """Sobrescreve os campos informados; id e data de criação não mudam"""
        fields = {k: v for k, v in fields.items() if k not in ("id", "created")}
        with self._lock:
            record = self._records.get(record_id)
            if record is None:
                return None
            updated = record.model_copy(update=fields)
            self._records[record_id] = updated
            return updated.model_copy()

    def delete(self, record_id: int) -> bool:
        with self._lock:
            return self._records.pop(record_id, None) is not None
