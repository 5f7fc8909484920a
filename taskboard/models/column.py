from enum import Enum
from taskboard.errors import InvalidColumn


class ColumnId(Enum):
    TODO = '1'
    IN_PROGRESS = '2'
    DONE = '3'

    @property
    def field(self):
        return _FIELDS[self]

    @property
    def label(self):
        return _LABELS[self]

    @classmethod
    def parse(cls, value):
        """Map an external column identifier ("1", "2" or "3") to a member."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            value = str(value)
        if isinstance(value, str):
            try:
                return cls(value.strip())
            except ValueError:
                pass
        raise InvalidColumn(value)


_FIELDS = {
    ColumnId.TODO: 'todo',
    ColumnId.IN_PROGRESS: 'in_progress',
    ColumnId.DONE: 'done',
}

_LABELS = {
    ColumnId.TODO: 'To Do',
    ColumnId.IN_PROGRESS: 'In Progress',
    ColumnId.DONE: 'Done',
}
