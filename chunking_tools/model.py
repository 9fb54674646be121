from dataclasses import dataclass, field

from dataclasses_json import dataclass_json


@dataclass_json
@dataclass
class ChunkLayout:
    span: int
    element_count: int
    group_lengths: list[int]
    group_count: int = field(init=False)
    straggler_length: int = field(init=False)

    def __post_init__(self):
        self.group_count = len(self.group_lengths)
        self.straggler_length = self.element_count % self.span

    def has_straggler(self) -> bool:
        return self.straggler_length > 0


@dataclass_json
@dataclass
class Batch:
    index: int
    first_element: int
    items: list
