import logging

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from bloodportal.errors import ApiError
from bloodportal.models.donor_model import Donor

logger = logging.getLogger(__name__)

# Define Blueprint for donor registration
donor_bp = Blueprint('donor_bp', __name__, url_prefix='/api/v1/donors')

REGISTERED_MESSAGE = "Registered successfully. You'll be alerted for matching requests."
NOT_REGISTERED_MESSAGE = 'Could not register. Save this info and try again later.'


def register_donor(client, payload):
    """Send a donor registration to the backend and return the donor status.

    Nothing is kept locally; the backend does matching and alerts.
    """
    donor = Donor.from_form(payload)
    try:
        client.register_donor(donor)
    except ApiError as e:
        logger.warning('Donor registration for %s failed: %s', donor.name, e)
        return {'success': False, 'message': NOT_REGISTERED_MESSAGE}
    logger.info('Registered donor %s (%s)', donor.name, donor.blood_type)
    return {'success': True, 'message': REGISTERED_MESSAGE}


# POST a donor registration
@donor_bp.route('/', methods=['POST'])
def create_donor():
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            raise BadRequest('No input data provided')

        required_fields = ['name', 'bloodType']
        for field in required_fields:
            if not data.get(field):
                raise BadRequest(f'Missing required field: {field}')

        try:
            status = register_donor(current_app.extensions['backend_client'], data)
        except ValueError as e:
            raise BadRequest(str(e))

        return jsonify(status), 201 if status['success'] else 502
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
