from taskboard import db
from .column import ColumnId
from .card import Card, CardStore
from .board import Board
from .document import BoardDocument

__all__ = ['db', 'ColumnId', 'Card', 'CardStore', 'Board', 'BoardDocument']
