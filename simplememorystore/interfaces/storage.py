from abc import ABC, abstractmethod
from collections.abc import Mapping
from contextlib import AbstractContextManager
from typing import Any

Record = dict[str, Any]


class IRecordStore(ABC):
    @abstractmethod
    def select(self, type: str, id: Any = None) -> Record | list[Record] | None:
        pass

    @abstractmethod
    def insert(self, type: str, element: Mapping[str, Any]) -> Record:
        pass

    @abstractmethod
    def replace(self, type: str, id: Any, new_element: Mapping[str, Any]) -> Record:
        pass

    @abstractmethod
    def remove(self, type: str, id: Any) -> Record:
        pass

    @abstractmethod
    def reset(self, confirm: bool = False) -> "IRecordStore | None":
        """Discard all collections when ``confirm`` is exactly ``True``."""
        pass

    @abstractmethod
    def lock(self) -> AbstractContextManager:
        pass
