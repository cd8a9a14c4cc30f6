from typing import Any, Optional, Protocol

from typing_extensions import runtime_checkable


@runtime_checkable
class DocumentProtocol(Protocol):
    def get(self, group: str, key: str) -> Optional[Any]: ...

    def set(self, group: str, key: str, value: Any) -> None: ...
