from abc import ABC
from dataclasses import dataclass
from typing import ClassVar, Optional


@dataclass
class Base(ABC):
    VERSION: ClassVar[str] = "1.0"

    id: Optional[str] = None
