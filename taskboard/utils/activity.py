from flask import current_app, has_request_context, request


def _remote_addr():
    if has_request_context():
        return request.environ.get('REMOTE_ADDR')
    return None


def log_board_action(board, action):
    """
    Log a board-level action (created, deleted)

    Args:
        board: Board instance or board id
        action: string describing the action
    """
    board_id = getattr(board, 'id', board)
    current_app.logger.info('board %s %s from %s', board_id, action, _remote_addr())


def log_card_action(board, card, action, **details):
    """
    Log a card action (created, updated, moved, deleted)

    Args:
        board: Board the card belongs to
        card: Card instance
        action: string describing the action
        details: extra key/value pairs to include, e.g. column names
    """
    extra = ' '.join(f'{key}={value}' for key, value in sorted(details.items()))
    current_app.logger.info('card %s on board %s %s %s from %s',
                            card.id, board.id, action, extra, _remote_addr())


def log_card_creation(board, card, column):
    log_card_action(board, card, 'created', column=column.field)


def log_card_update(board, card, column):
    log_card_action(board, card, 'updated', column=column.field)


def log_card_deletion(board, card, column):
    log_card_action(board, card, 'deleted', column=column.field)


def log_card_move(board, card, from_column, to_column):
    log_card_action(board, card, 'moved', from_column=from_column.field,
                    to_column=to_column.field, index=card.index)
