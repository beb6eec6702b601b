from __future__ import annotations

from dataclasses import dataclass, field

from ..deletion import DeletionResult
from ..tree_model import DirTree, VisibleRow


@dataclass
class AppState:
    tree: DirTree
    rows: list[VisibleRow] = field(default_factory=list)
    cursor: int | None = None
    tree_start: int = 0
    usable: int = 1
    dirty: bool = True
    show_size_labels: bool = True
    status_message: str = ""
    status_message_until: float = 0.0
    last_deletion: DeletionResult | None = None

    @property
    def cursor_row(self) -> VisibleRow | None:
        if self.cursor is None or not self.rows:
            return None
        return self.rows[self.cursor]
