class KanbanError(Exception):
    status_code = 500
    kind = 'error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message())
        self.message = message or self.default_message()

    def default_message(self):
        return 'Internal server error'

    def to_dict(self):
        return {'error': self.kind, 'message': self.message}


class NotFound(KanbanError):
    status_code = 404
    kind = 'not_found'

    def default_message(self):
        return 'Not found'


class BoardNotFound(NotFound):
    def __init__(self, board_id):
        self.board_id = board_id
        super().__init__(f'Board {board_id} not found')


class CardNotFound(NotFound):
    def __init__(self, card_id):
        self.card_id = card_id
        super().__init__(f'Card {card_id} not found in the specified column')


class InvalidColumn(KanbanError):
    status_code = 400
    kind = 'invalid_column'

    def __init__(self, value):
        self.value = value
        super().__init__(f'Invalid column: {value!r}')


class ValidationError(KanbanError):
    status_code = 400
    kind = 'validation_error'

    def __init__(self, message=None, errors=None):
        self.errors = errors or {}
        super().__init__(message or 'Invalid request')

    def to_dict(self):
        data = super().to_dict()
        if self.errors:
            data['fields'] = self.errors
        return data


class StorageError(KanbanError):
    kind = 'storage_error'

    def default_message(self):
        return 'Storage error'


class StaleBoard(StorageError):
    """Raised when a board was changed by another request since it was loaded."""
    status_code = 409
    kind = 'conflict'

    def __init__(self, board_id):
        self.board_id = board_id
        super().__init__(f'Board {board_id} was modified by another request')
