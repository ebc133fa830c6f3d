from dataclasses import InitVar, dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence, TypeVar

from ..parts.gadget import Gadget
from .base import Base
from .color import Color

G = TypeVar("G", bound=Gadget)


@dataclass
class Widget(Base):
    @dataclass
    class Dimensions:
        width: float = 0.0
        height: float = 0.0

    name: Optional[str] = None
    interface: List[Gadget] = field(default_factory=list)
    default: Optional[int] = None
    spares: Sequence[G] = ()
    color: Optional[Color] = None
    created: Optional[datetime] = None
    labels: Dict[str, int] = field(default_factory=dict)
    size: Optional[Dimensions] = None
    parent: Optional["Widget"] = None
    seed: InitVar[int] = 0
