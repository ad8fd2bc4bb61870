"""
Per-day to-do list with a pluggable deletion strategy.
"""
from typing import Callable, List, Optional, Protocol

from models import TodoItem

Remove = Callable[[], None]


class DeletionStrategy(Protocol):
    def delete(self, index: int, remove: Remove) -> None:
        ...


class ImmediateDeletion:
    """Remove the row right away"""

    def delete(self, index: int, remove: Remove) -> None:
        remove()


class AnimatedDeletion:
    """Hand the row to an animation and remove it once the animation reports completion"""

    def __init__(self, play: Callable[[int, Remove], None]):
        self.play = play

    def delete(self, index: int, remove: Remove) -> None:
        self.play(index, remove)


class TodoList:
    """
    Operations over an ordered list of TodoItems owned by a DayRecord.
    on_change is called after every accepted mutation (persist + re-render).
    """

    def __init__(
        self,
        items: List[TodoItem],
        on_change: Callable[[], None],
        deletion: Optional[DeletionStrategy] = None,
    ):
        self.items = items
        self.on_change = on_change
        self.deletion = deletion or ImmediateDeletion()

    def __len__(self):
        return len(self.items)

    def add(self, text: str) -> bool:
        """Append a new open item; whitespace-only text is rejected"""
        text = (text or "").strip()
        if not text:
            return False
        self.items.append(TodoItem(text=text, completed=False))
        self.on_change()
        return True

    def toggle(self, index: int):
        item = self._get(index)
        item.completed = not item.completed
        self.on_change()

    def delete(self, index: int):
        item = self._get(index)
        self.deletion.delete(index, lambda: self._remove(item))

    def _remove(self, item: TodoItem):
        # The row may already be gone if it was removed while animating
        for i, existing in enumerate(self.items):
            if existing is item:
                del self.items[i]
                self.on_change()
                return

    def _get(self, index: int) -> TodoItem:
        if not 0 <= index < len(self.items):
            raise IndexError(f"No to-do at position {index}")
        return self.items[index]
