# platapay/__init__.py

import logging
from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
from .config import Config

db = SQLAlchemy()
migrate = Migrate()

def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    # One reverse proxy (Vercel) sits in front; request.host_url must be the public origin.
    app.wsgi_app = ProxyFix(app.wsgi_app, x_for=1, x_proto=1, x_host=1)

    # Configure logging to show INFO level messages
    app.logger.setLevel(logging.INFO)
    if not app.logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        formatter = logging.Formatter('[%(asctime)s] %(levelname)s: %(message)s')
        handler.setFormatter(formatter)
        app.logger.addHandler(handler)

    db.init_app(app)
    migrate.init_app(app, db)

    # Only the JSON API needs CORS. The embed pages and loader scripts are
    # plain GETs that third-party pages load directly.
    CORS(app, resources={r"/api/*": {"origins": app.config['CORS_ORIGINS']}},
         supports_credentials=True)

    # --- REGISTER BLUEPRINTS ---
    from .api.agents import bp as agents_bp
    from .api.admin import bp as admin_bp
    from .api.assistant import bp as assistant_bp
    from .api.system import bp as system_bp

    app.register_blueprint(agents_bp, url_prefix='/api')
    app.register_blueprint(admin_bp, url_prefix='/api')
    app.register_blueprint(assistant_bp, url_prefix='/api')
    app.register_blueprint(system_bp, url_prefix='/api')

    from .auth import bp as auth_blueprint
    app.register_blueprint(auth_blueprint, url_prefix='/auth')

    # Embed pages and loader scripts live at the site root
    from .embed import bp as embed_bp
    app.register_blueprint(embed_bp)

    with app.app_context():
        from . import models

    return app
