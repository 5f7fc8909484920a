from taskboard.errors import ValidationError
from taskboard.models.card import Card, CardStore, new_card_id
from taskboard.models.column import ColumnId
from taskboard.services.transfer import transfer


def parse_position(value):
    """Turn a requested target position into an int, or None for "at the end"."""
    if value is None or value == '':
        return None
    if isinstance(value, bool):
        raise ValidationError('Invalid target position', {'to_index': ['Not a valid integer value.']})
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError('Invalid target position', {'to_index': ['Not a valid integer value.']})


class Board:
    """A board and its three ordered columns.

    Every card operation resolves its column(s) before touching any store, so
    a failed operation leaves the board exactly as it was.
    """

    def __init__(self, id, name, todo=None, in_progress=None, done=None,
                 version=None, created_at=None, updated_at=None):
        self.id = id
        self.name = name
        self.version = version
        self.created_at = created_at
        self.updated_at = updated_at
        self.columns = {
            ColumnId.TODO: CardStore(todo),
            ColumnId.IN_PROGRESS: CardStore(in_progress),
            ColumnId.DONE: CardStore(done)
        }

    @property
    def todo(self):
        return self.columns[ColumnId.TODO]

    @property
    def in_progress(self):
        return self.columns[ColumnId.IN_PROGRESS]

    @property
    def done(self):
        return self.columns[ColumnId.DONE]

    def column_for(self, column):
        return self.columns[ColumnId.parse(column)]

    def card_ids(self):
        return [card_id for store in self.columns.values() for card_id in store.ids()]

    def add_card(self, column, title, description=''):
        store = self.column_for(column)
        card = Card(id=self._new_card_id(), title=title, description=description)
        return store.append(card)

    def edit_card(self, column, card_id, title, description):
        card = self.column_for(column).find_by_id(card_id)
        card.title = title
        card.description = description
        return card

    def delete_card(self, column, card_id):
        return self.column_for(column).remove_by_id(card_id)

    def move_card(self, from_column, to_column, card_id, to_index=None):
        source = self.column_for(from_column)
        dest = self.column_for(to_column)
        position = parse_position(to_index)
        return transfer(source, dest, card_id, position)

    def _new_card_id(self):
        existing = set(self.card_ids())
        card_id = new_card_id()
        while card_id in existing:
            card_id = new_card_id()
        return card_id

    @classmethod
    def from_document(cls, id, name, todo=None, in_progress=None, done=None, **kwargs):
        return cls(
            id=id,
            name=name,
            todo=[Card.from_dict(card) for card in todo or []],
            in_progress=[Card.from_dict(card) for card in in_progress or []],
            done=[Card.from_dict(card) for card in done or []],
            **kwargs
        )

    def to_dict(self):
        data = {'id': self.id, 'name': self.name}
        for column_id, store in self.columns.items():
            data[column_id.field] = store.to_list()
        data['version'] = self.version
        data['created_at'] = self.created_at.isoformat() if self.created_at else None
        data['updated_at'] = self.updated_at.isoformat() if self.updated_at else None
        return data

    def __repr__(self):
        return f'<Board {self.name}>'
