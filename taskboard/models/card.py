import uuid
from taskboard.errors import CardNotFound


def new_card_id():
    return str(uuid.uuid4())


class Card:
    def __init__(self, id, title, description='', index='0'):
        self.id = id
        self.index = index
        self.title = title
        self.description = description

    @classmethod
    def from_dict(cls, data):
        return cls(
            id=data['id'],
            title=data.get('title', ''),
            description=data.get('description') or '',
            index=str(data.get('index', '0'))
        )

    def to_dict(self):
        return {
            'id': self.id,
            'index': self.index,
            'title': self.title,
            'description': self.description
        }

    def __eq__(self, other):
        if not isinstance(other, Card):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self):
        return f'<Card {self.id} {self.title!r}>'


class CardStore:
    """Ordered cards of one column.

    Store order is the position; every mutation renumbers ``Card.index`` so
    the stored index always matches it.
    """

    def __init__(self, cards=None):
        self._cards = list(cards or [])
        self._renumber()

    def __len__(self):
        return len(self._cards)

    def __iter__(self):
        return iter(self._cards)

    def __getitem__(self, position):
        return self._cards[position]

    def ids(self):
        return [card.id for card in self._cards]

    def position_of(self, card_id):
        for position, card in enumerate(self._cards):
            if card.id == card_id:
                return position
        raise CardNotFound(card_id)

    def find_by_id(self, card_id):
        return self._cards[self.position_of(card_id)]

    def append(self, card):
        self._cards.append(card)
        card.index = str(len(self._cards) - 1)
        return card

    def insert_at(self, position, card):
        position = max(0, min(position, len(self._cards)))
        self._cards.insert(position, card)
        self._renumber(position)
        return card

    def remove_by_id(self, card_id):
        position = self.position_of(card_id)
        card = self._cards.pop(position)
        self._renumber(position)
        return card

    def to_list(self):
        return [card.to_dict() for card in self._cards]

    def _renumber(self, start=0):
        for position in range(start, len(self._cards)):
            self._cards[position].index = str(position)
