from taskboard import db
from datetime import datetime
from taskboard.models.board import Board
from taskboard.models.column import ColumnId


class BoardDocument(db.Model):
    """One row per board; each column is stored as a JSON array of cards."""
    __tablename__ = 'boards'

    id = db.Column(db.String(64), primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    todo = db.Column(db.JSON, nullable=False, default=list)
    in_progress = db.Column(db.JSON, nullable=False, default=list)
    done = db.Column(db.JSON, nullable=False, default=list)
    version = db.Column(db.Integer, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    __mapper_args__ = {'version_id_col': version}

    def to_board(self):
        return Board.from_document(
            id=self.id,
            name=self.name,
            todo=self.todo,
            in_progress=self.in_progress,
            done=self.done,
            version=self.version,
            created_at=self.created_at,
            updated_at=self.updated_at
        )

    def apply(self, board):
        # Whole columns are reassigned so the JSON change is always detected
        self.name = board.name
        for column_id in ColumnId:
            setattr(self, column_id.field, board.columns[column_id].to_list())

    def __repr__(self):
        return f'<BoardDocument {self.id} v{self.version}>'
