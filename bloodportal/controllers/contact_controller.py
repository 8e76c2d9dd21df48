from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

# Define the Blueprint for contact / quick chat messages
contact_bp = Blueprint('contact_bp', __name__, url_prefix='/api/v1/contact')


def get_contact_log():
    return current_app.extensions['contact_log']


# GET the local message stream
@contact_bp.route('/', methods=['GET'])
def get_messages():
    return jsonify([m.to_dict() for m in get_contact_log().messages()]), 200


# POST a new message; it is kept even if the backend is unreachable
@contact_bp.route('/', methods=['POST'])
def send_message():
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            raise BadRequest('No input data provided')

        text = data.get('text')
        if not isinstance(text, str):
            raise BadRequest('Missing required field: text')

        try:
            message = get_contact_log().send(text)
        except ValueError as e:
            raise BadRequest(str(e))

        return jsonify(message.to_dict()), 201
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
