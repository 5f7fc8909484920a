from flask import Blueprint, render_template, request
from taskboard.models import ColumnId
from taskboard.services.gateway import BoardGateway

main_bp = Blueprint('main', __name__)
gateway = BoardGateway()


@main_bp.route('/')
def index():
    """Board list, optionally narrowed to a single board id"""
    search = request.args.get('board_id', '').strip()
    boards = gateway.list_boards()
    if search:
        boards = [board for board in boards if board.id == search]

    return render_template('index.html',
        boards=boards,
        columns=list(ColumnId),
        search=search
    )
