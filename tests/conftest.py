"""Shared fixtures for taskboard tests."""

import pytest

from config import TestingConfig
from taskboard import create_app, db
from taskboard.models import Board, Card
from taskboard.services.gateway import BoardGateway


def make_board(todo=(), in_progress=(), done=(), board_id='board-1', name='Board'):
    """Build a board in memory; each card's id is its title."""
    return Board(
        id=board_id,
        name=name,
        todo=[Card(id=title, title=title) for title in todo],
        in_progress=[Card(id=title, title=title) for title in in_progress],
        done=[Card(id=title, title=title) for title in done],
    )


def titles(store):
    return [card.title for card in store]


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def gateway(app):
    return BoardGateway()
