from flask import Blueprint, jsonify
from werkzeug.exceptions import NotFound

from bloodportal.models.hospital_model import HOSPITALS, get_hospital, hospital_to_dict

# Define Blueprint for the hospital & blood bank directory
hospital_bp = Blueprint('hospital_bp', __name__, url_prefix='/api/v1/hospitals')


# GET all hospitals
@hospital_bp.route('/', methods=['GET'])
def get_hospitals():
    return jsonify([hospital_to_dict(h) for h in HOSPITALS]), 200


# GET a specific hospital by ID
@hospital_bp.route('/<int:id>', methods=['GET'])
def get_hospital_by_id(id):
    try:
        hospital = get_hospital(id)
        if not hospital:
            raise NotFound('Hospital not found')
        return jsonify(hospital_to_dict(hospital)), 200
    except NotFound as e:
        return jsonify({'error': e.description}), 404
