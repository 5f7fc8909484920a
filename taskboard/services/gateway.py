import uuid
from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm.exc import StaleDataError
from taskboard import db
from taskboard.errors import BoardNotFound, StaleBoard, StorageError, ValidationError
from taskboard.models import Board, BoardDocument

SEED_BOARDS = [
    {
        'name': 'Board 1',
        'todo': [
            ('Task 1', 'Description for Task 1'),
            ('Task 2', 'Description for Task 2')
        ],
        'in_progress': [
            ('Task 3', 'Description for Task 3')
        ],
        'done': [
            ('Task 4', 'Description for Task 4')
        ]
    },
    {
        'name': 'Board 2'
    }
]


def new_board_id():
    return str(uuid.uuid4())


class BoardGateway:
    """Loads and saves whole boards as single documents."""

    def list_boards(self):
        records = BoardDocument.query.order_by(BoardDocument.created_at.asc(), BoardDocument.name.asc()).all()
        return [record.to_board() for record in records]

    def load_board(self, board_id):
        record = db.session.get(BoardDocument, board_id)
        if record is None:
            raise BoardNotFound(board_id)
        return record.to_board()

    def create_board(self, name, board_id=None):
        board = Board(id=board_id or new_board_id(), name=name)
        if db.session.get(BoardDocument, board.id) is not None:
            raise ValidationError(f'Board {board.id} already exists',
                                  {'id': ['A board with this id already exists.']})

        record = BoardDocument(id=board.id)
        record.apply(board)
        db.session.add(record)
        self._commit(board.id)
        return record.to_board()

    def save_board(self, board):
        """Write the board back; fails with StaleBoard if the stored version moved on."""
        record = db.session.get(BoardDocument, board.id)
        if record is None:
            raise BoardNotFound(board.id)
        if board.version is not None and record.version != board.version:
            raise StaleBoard(board.id)

        record.apply(board)
        self._commit(board.id)
        board.version = record.version
        board.updated_at = record.updated_at

    def delete_board(self, board_id):
        record = db.session.get(BoardDocument, board_id)
        if record is None:
            raise BoardNotFound(board_id)
        db.session.delete(record)
        self._commit(board_id)

    def seed_if_empty(self, boards=SEED_BOARDS):
        if db.session.query(BoardDocument.id).first() is not None:
            current_app.logger.info('Database already contains boards, skipping seed')
            return False

        for data in boards:
            board = Board(id=new_board_id(), name=data['name'])
            for column in board.columns:
                for title, description in data.get(column.field, []):
                    board.add_card(column, title, description)
            record = BoardDocument(id=board.id)
            record.apply(board)
            db.session.add(record)
        self._commit('seed')
        current_app.logger.info('Database seeded with %d initial boards', len(boards))
        return True

    def _commit(self, board_id):
        try:
            db.session.commit()
        except StaleDataError:
            db.session.rollback()
            current_app.logger.warning('Stale write rejected for board %s', board_id)
            raise StaleBoard(board_id)
        except SQLAlchemyError as e:
            db.session.rollback()
            current_app.logger.error('Error saving board %s: %s', board_id, e)
            raise StorageError(f'Could not save board {board_id}') from e
