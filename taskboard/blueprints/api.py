from flask import Blueprint, jsonify, request
from flask_wtf import FlaskForm
from werkzeug.datastructures import ImmutableMultiDict
from wtforms import StringField, TextAreaField, IntegerField
from wtforms.validators import DataRequired, Length, Optional
from taskboard.errors import StaleBoard, ValidationError
from taskboard.models import ColumnId
from taskboard.services.gateway import BoardGateway
from taskboard.utils.activity import (log_board_action, log_card_creation, log_card_update,
                                      log_card_deletion, log_card_move)

api_bp = Blueprint('api', __name__)
gateway = BoardGateway()


class JsonForm(FlaskForm):
    class Meta:
        csrf = False

        def wrap_formdata(self, form, formdata):
            # JSON nulls count as absent, other scalars reach the fields as text
            formdata = super().wrap_formdata(form, formdata)
            if formdata is None or not request.is_json:
                return formdata
            return ImmutableMultiDict([
                (key, value if isinstance(value, str) else str(value))
                for key, value in formdata.items(multi=True)
                if value is not None
            ])


class BoardForm(JsonForm):
    id = StringField('Id', validators=[Optional(), Length(max=64)])
    name = StringField('Name', validators=[
        DataRequired(),
        Length(max=100)
    ])


class CardForm(JsonForm):
    title = StringField('Title', validators=[
        DataRequired(),
        Length(max=200)
    ])
    description = TextAreaField('Description', validators=[Optional()])
    version = IntegerField('Version', validators=[Optional()])


class MoveCardForm(JsonForm):
    from_column = StringField('From column', validators=[DataRequired()])
    to_column = StringField('To column', validators=[DataRequired()])
    to_index = IntegerField('Target position', validators=[Optional()])
    version = IntegerField('Version', validators=[Optional()])


def validated(form):
    if not form.validate():
        raise ValidationError('Invalid request', form.errors)
    return form


def check_version(board, version):
    if version is not None and version != board.version:
        raise StaleBoard(board.id)


@api_bp.route('/boards', methods=['GET'])
def list_boards():
    return jsonify([board.to_dict() for board in gateway.list_boards()])


@api_bp.route('/boards/<board_id>', methods=['GET'])
def get_board(board_id):
    return jsonify(gateway.load_board(board_id).to_dict())


@api_bp.route('/boards', methods=['POST'])
def create_board():
    form = validated(BoardForm())
    board_id = (form.id.data or '').strip() or None
    board = gateway.create_board(form.name.data.strip(), board_id)
    log_board_action(board, 'created')
    return jsonify(board.to_dict()), 201


@api_bp.route('/boards/<board_id>', methods=['DELETE'])
def delete_board(board_id):
    gateway.delete_board(board_id)
    log_board_action(board_id, 'deleted')
    return '', 204


@api_bp.route('/boards/<board_id>/columns/<column>/cards', methods=['POST'])
def add_card(board_id, column):
    form = validated(CardForm())
    board = gateway.load_board(board_id)
    check_version(board, form.version.data)

    column_id = ColumnId.parse(column)
    card = board.add_card(column_id, form.title.data, form.description.data or '')
    gateway.save_board(board)
    log_card_creation(board, card, column_id)
    return jsonify(card.to_dict()), 201


@api_bp.route('/boards/<board_id>/columns/<column>/cards/<card_id>', methods=['PUT'])
def update_card(board_id, column, card_id):
    form = validated(CardForm())
    board = gateway.load_board(board_id)
    check_version(board, form.version.data)

    column_id = ColumnId.parse(column)
    card = board.edit_card(column_id, card_id, form.title.data, form.description.data or '')
    gateway.save_board(board)
    log_card_update(board, card, column_id)
    return jsonify(card.to_dict())


@api_bp.route('/boards/<board_id>/columns/<column>/cards/<card_id>', methods=['DELETE'])
def delete_card(board_id, column, card_id):
    board = gateway.load_board(board_id)
    check_version(board, request.args.get('version', type=int))

    column_id = ColumnId.parse(column)
    card = board.delete_card(column_id, card_id)
    gateway.save_board(board)
    log_card_deletion(board, card, column_id)
    return '', 204


@api_bp.route('/boards/<board_id>/cards/<card_id>/move', methods=['PUT'])
def move_card(board_id, card_id):
    form = validated(MoveCardForm())
    board = gateway.load_board(board_id)
    check_version(board, form.version.data)

    from_column = ColumnId.parse(form.from_column.data)
    to_column = ColumnId.parse(form.to_column.data)
    card = board.move_card(from_column, to_column, card_id, form.to_index.data)
    gateway.save_board(board)
    log_card_move(board, card, from_column, to_column)
    return jsonify(card.to_dict())
