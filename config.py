import os


def _database_url(default):
    url = os.environ.get('DATABASE_URL') or default
    # Fix for SQLAlchemy compatibility
    if url.startswith('postgres://'):
        url = url.replace('postgres://', 'postgresql://', 1)
    return url


def _flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'taskboard-dev-key'
    SQLALCHEMY_DATABASE_URI = _database_url('sqlite:///taskboard.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    SEED_ON_STARTUP = _flag('TASKBOARD_SEED', True)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SEED_ON_STARTUP = False
    LOG_LEVEL = 'DEBUG'
