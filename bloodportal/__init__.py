import atexit

from flask import Flask

from bloodportal.config import Config
from bloodportal.extensions import cors, scheduler
from bloodportal.services.api_client import BackendClient
from bloodportal.services.contact_log import ContactLog
from bloodportal.services.polling import start_polling, stop_polling
from bloodportal.services.request_feed import RequestFeedController

# Import controllers (blueprints) for each module
from bloodportal.controllers.portal_controller import portal_bp
from bloodportal.controllers.blood_request_controller import blood_request_bp
from bloodportal.controllers.donor_controller import donor_bp
from bloodportal.controllers.hospital_controller import hospital_bp
from bloodportal.controllers.contact_controller import contact_bp


def create_app(config_object=None, client=None):
    """Flask application factory

    `config_object` is a config class or a dict of overrides on top of
    Config. `client` replaces the BackendClient built from BACKEND_URL.
    """
    app = Flask(__name__)

    app.config.from_object(Config)
    if isinstance(config_object, dict):
        app.config.update(config_object)
    elif config_object is not None:
        app.config.from_object(config_object)

    # Every module logger lives under the app logger ('bloodportal')
    app.logger.setLevel(app.config['LOG_LEVEL'])

    # Initialize extensions
    cors.init_app(app)
    scheduler.init_app(app)

    # State owned by the portal; blueprints reach it through app.extensions
    client = client or BackendClient.from_config(app.config)
    feed = RequestFeedController.from_config(client, app.config)
    app.extensions['backend_client'] = client
    app.extensions['request_feed'] = feed
    app.extensions['contact_log'] = ContactLog(client)

    # Register Blueprints with appropriate URL prefixes
    app.register_blueprint(portal_bp)
    app.register_blueprint(blood_request_bp, url_prefix='/api/v1/requests')
    app.register_blueprint(donor_bp, url_prefix='/api/v1/donors')
    app.register_blueprint(hospital_bp, url_prefix='/api/v1/hospitals')
    app.register_blueprint(contact_bp, url_prefix='/api/v1/contact')

    if app.config['POLL_ENABLED']:
        start_polling(app, feed)
        atexit.register(stop_polling)

    return app
