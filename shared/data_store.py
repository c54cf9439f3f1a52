"""
Record storage for the customer registration services.

Each service owns one RecordStore and nothing else writes to it. The store is
responsible for assigning identifiers: callers build records with the id field
left as None and get the assigned id back from insert().

Design decisions:
- In-memory by default, which is what the tests and the demo use
- Optionally JSON-backed: records are loaded from the file on start and the
  whole file is rewritten after every insert
- Insert is serialized with a lock so ids stay unique under the threadpool
  FastAPI runs sync endpoints on; there is no other locking
"""

import json
import logging
import threading
from pathlib import Path
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

from shared.exceptions import PersistenceFailure

logger = logging.getLogger("data_store")

RecordT = TypeVar("RecordT", bound=BaseModel)


class RecordStore(Generic[RecordT]):
    """
    Ordered store of pydantic records with integer ids.
    
    Example:
        store = RecordStore(Customer)
        customer_id = store.insert(Customer(first_name="Ada", last_name="Lovelace", email="ada@x.io"))
        store.list_all()  # [Customer(id=1, ...)]
    """
    
    def __init__(
        self,
        model: type[RecordT],
        id_field: str = "id",
        path: Optional[Path] = None,
    ):
        """
        Initialize the store.
        
        Args:
            model: Record class, used to load records back from JSON.
            id_field: Name of the attribute the assigned id goes into.
            path: JSON file to persist records in. None keeps them in memory.
        """
        self.model = model
        self.id_field = id_field
        self.path = Path(path) if path is not None else None
        
        self._records: list[RecordT] = []
        self._next_id = 1
        self._lock = threading.Lock()
        
        if self.path is not None:
            self._load()
    
    def _load(self):
        """Load existing records from the JSON file, if there is one."""
        if not self.path.is_file():
            return
        with open(self.path, "r") as f:
            data = json.load(f)
        self._records = [self.model.model_validate(r) for r in data]
        ids = [getattr(r, self.id_field) for r in self._records]
        self._next_id = max(ids, default=0) + 1
        logger.info(f"Loaded {len(self._records)} records from {self.path}")
    
    def _write(self, records: list[RecordT]):
        """Rewrite the JSON file with the given records."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w") as f:
                json.dump([r.model_dump(mode="json", by_alias=True) for r in records], f, indent=2)
        except OSError as e:
            raise PersistenceFailure(f"Could not write {self.path}: {e}") from e
    
    def insert(self, record: RecordT) -> int:
        """
        Store a record and assign it the next id.
        
        Returns:
            The assigned id.
        
        Raises:
            PersistenceFailure: if the JSON file could not be written. The
                record is not kept in that case.
        """
        with self._lock:
            record_id = self._next_id
            stored = record.model_copy(update={self.id_field: record_id})
            records = self._records + [stored]
            if self.path is not None:
                self._write(records)
            self._records = records
            self._next_id += 1
        logger.debug(f"Inserted {self.model.__name__} {record_id}")
        return record_id
    
    def get(self, record_id: int) -> Optional[RecordT]:
        """Get a record by id."""
        for record in self._records:
            if getattr(record, self.id_field) == record_id:
                return record
        return None
    
    def list_all(self) -> list[RecordT]:
        """All records in insertion order."""
        return list(self._records)
    
    def __len__(self) -> int:
        return len(self._records)
