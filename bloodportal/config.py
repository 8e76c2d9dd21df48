import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name, default):
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_float(name, default=None):
    value = os.getenv(name)
    if value is None or value == '':
        return default
    return float(value)


class Config:
    """Portal configuration, read from the environment (and .env)"""
    SECRET_KEY = os.getenv('SECRET_KEY', 'change-me')

    # External backend that owns persistence, matching and notifications
    BACKEND_URL = os.getenv('BACKEND_URL', 'http://localhost:5000')
    BACKEND_TIMEOUT = _env_float('BACKEND_TIMEOUT')  # None = wait forever

    # Request feed polling
    POLL_ENABLED = _env_bool('POLL_ENABLED', True)
    POLL_INTERVAL_SECONDS = int(os.getenv('POLL_INTERVAL_SECONDS', '12'))
    POLL_MAX_INSTANCES = int(os.getenv('POLL_MAX_INSTANCES', '3'))
    DISCARD_STALE_POLLS = _env_bool('DISCARD_STALE_POLLS', False)

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

    # Flask-APScheduler
    SCHEDULER_API_ENABLED = _env_bool('SCHEDULER_API_ENABLED', False)


class TestingConfig(Config):
    TESTING = True
    SECRET_KEY = 'testing'
    BACKEND_URL = 'http://backend.test'
    BACKEND_TIMEOUT = None
    POLL_ENABLED = False
    DISCARD_STALE_POLLS = False
    LOG_LEVEL = 'DEBUG'
    SCHEDULER_API_ENABLED = False
