import dataclasses
from typing import List


@dataclasses.dataclass
class ProductRecord:
    name: str
    categories: List[str] = dataclasses.field(default_factory=list)
