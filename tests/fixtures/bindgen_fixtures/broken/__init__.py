from dataclasses import dataclass
from typing import Optional


@dataclass
class Broken:
    missing: Optional["NoSuchType"] = None  # noqa: F821
