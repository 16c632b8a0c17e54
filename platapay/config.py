# config.py

import os
from dotenv import load_dotenv

# Get the base directory of the application
basedir = os.path.abspath(os.path.dirname(__file__))

# This line finds the .env file in your root directory and loads it.
load_dotenv(os.path.join(basedir, '..', '.env'))
# --------------------------------------


def _split_origins(value):
    return [origin.strip() for origin in (value or '').split(',') if origin.strip()]


class Config:
    """
    Contains all the configuration variables for the application,
    including database settings, Supabase auth and the embed widgets.
    """
    # --- Database Settings ---
    # Reads the database URL from the .env file.
    # Provides a default (e.g., for SQLite) if the variable isn't set.
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'app.db')

    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # --- Secret Key ---
    SECRET_KEY = os.environ.get('SECRET_KEY')

    # --- Supabase (auth provider + hosted Postgres) ---
    SUPABASE_URL = os.environ.get('SUPABASE_URL')
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY')
    SUPABASE_SERVICE_ROLE_KEY = os.environ.get('SUPABASE_SERVICE_ROLE_KEY')
    SUPABASE_JWT_SECRET = os.environ.get('SUPABASE_JWT_SECRET')

    # --- Public URLs ---
    # Where this application is reachable from the outside.
    APP_URL = os.environ.get('APP_URL') or 'http://localhost:5000'

    # The form widget may live on a different domain than the loader script.
    # The trusted origin defaults to the origin of EMBED_FORM_URL.
    EMBED_FORM_URL = os.environ.get('EMBED_FORM_URL') or APP_URL.rstrip('/') + '/embed'
    EMBED_FORM_ORIGIN = os.environ.get('EMBED_FORM_ORIGIN')

    # Origins allowed to call the JSON API from a browser.
    CORS_ORIGINS = _split_origins(os.environ.get('CORS_ORIGINS')) or [
        "http://127.0.0.1:5000",
        "http://localhost:5000",
        "http://localhost:3000",
    ]

    # --- Email Settings ---
    MAIL_SERVER = os.environ.get('MAIL_SERVER') or 'smtp.gmail.com'
    MAIL_PORT = int(os.environ.get('MAIL_PORT') or 587)
    MAIL_USE_TLS = os.environ.get('MAIL_USE_TLS') is not None
    MAIL_USERNAME = os.environ.get('MAIL_USERNAME')
    MAIL_PASSWORD = os.environ.get('MAIL_PASSWORD')

    # --- Third-party APIs ---
    MAPBOX_TOKEN = os.environ.get('MAPBOX_TOKEN')

    # Groq exposes an OpenAI-compatible endpoint.
    GROQ_API_KEY = os.environ.get('GROQ_API_KEY')
    GROQ_BASE_URL = os.environ.get('GROQ_BASE_URL') or 'https://api.groq.com/openai/v1'
    GROQ_MODEL = os.environ.get('GROQ_MODEL') or 'llama-3.3-70b-versatile'

    ELEVENLABS_API_KEY = os.environ.get('ELEVENLABS_API_KEY')
    ELEVENLABS_VOICE_ID = os.environ.get('ELEVENLABS_VOICE_ID')
    ELEVENLABS_BASE_URL = os.environ.get('ELEVENLABS_BASE_URL') or 'https://api.elevenlabs.io'
    UPSTREAM_TIMEOUT = int(os.environ.get('UPSTREAM_TIMEOUT') or 20)

    # --- Roles ---
    DEFAULT_ROLE = 'agent'
    ROLES = ('admin', 'agent')
    AGENT_STATUSES = ('pending', 'approved', 'rejected')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite://'
    SECRET_KEY = 'test-secret-key'
    SUPABASE_JWT_SECRET = 'test-jwt-secret-with-enough-length-for-hs256'
    SUPABASE_URL = None
    SUPABASE_ANON_KEY = None
    SUPABASE_SERVICE_ROLE_KEY = None
    CORS_ORIGINS = ["http://localhost"]
    APP_URL = 'http://localhost'
    EMBED_FORM_URL = 'https://forms.platapay.test/embed'
    EMBED_FORM_ORIGIN = None
    MAPBOX_TOKEN = 'pk.test-token'
    GROQ_API_KEY = 'gsk_test'
    GROQ_MODEL = 'llama-3.3-70b-versatile'
    ELEVENLABS_API_KEY = 'xi-test'
    ELEVENLABS_VOICE_ID = 'voice-test'
    ELEVENLABS_BASE_URL = 'https://api.elevenlabs.io'
    MAIL_SERVER = 'smtp.platapay.test'
    MAIL_PORT = 587
    MAIL_USE_TLS = True
    MAIL_USERNAME = 'no-reply@platapay.test'
    MAIL_PASSWORD = 'mail-secret'
