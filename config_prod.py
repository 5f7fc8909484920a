import os
from config import Config, _database_url, _flag


class ProductionConfig(Config):
    # Use PostgreSQL for production; DATABASE_URL is read from the environment
    # (Supabase, Neon, Railway and Vercel Postgres URLs all work)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'taskboard-production-key'

    SQLALCHEMY_DATABASE_URI = _database_url('sqlite:////tmp/taskboard.db')

    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SEED_ON_STARTUP = _flag('TASKBOARD_SEED', False)
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'WARNING')
