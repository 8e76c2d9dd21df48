from flask import Blueprint, current_app, jsonify

from bloodportal.models.choices import BloodType, Urgency
from bloodportal.services.api_client import CONTACT_PATH, DONORS_PATH, HOSPITALS_PATH, REQUESTS_PATH

portal_bp = Blueprint('portal_bp', __name__)

RESOURCE_TIPS = [
    'Confirm blood type and crossmatch at the receiving hospital.',
    'Inform donors about eligibility and last-donation date.',
    'Use contact numbers for urgent coordination.',
]

BACKEND_ENDPOINTS = [
    {'path': REQUESTS_PATH, 'methods': ['GET', 'POST'], 'purpose': 'list / create requests'},
    {'path': DONORS_PATH, 'methods': ['POST'], 'purpose': 'register donor'},
    {'path': HOSPITALS_PATH, 'methods': ['GET'], 'purpose': 'hospital list (optional)'},
    {'path': CONTACT_PATH, 'methods': ['POST'], 'purpose': 'contact messages'},
]


@portal_bp.route('/', methods=['GET'])
def index():
    return jsonify({
        'title': 'Emergency Blood Donation Portal',
        'description': 'A centralized place to request blood, register as a donor, '
                       'and find hospitals & blood banks.',
        'bloodTypes': BloodType.values(),
        'urgencies': Urgency.values(),
        'resources': RESOURCE_TIPS,
        'backend': {
            'url': current_app.config['BACKEND_URL'],
            'endpoints': BACKEND_ENDPOINTS,
        },
    }), 200
