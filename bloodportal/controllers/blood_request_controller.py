from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from bloodportal.models.blood_request_model import BloodRequest
from bloodportal.models.choices import BloodType, Urgency
from bloodportal.models.filter_model import FilterState

# Define Blueprint for the active blood requests feed
blood_request_bp = Blueprint('blood_request_bp', __name__, url_prefix='/api/v1/requests')

SUBMITTED_MESSAGE = 'Blood request submitted - matching donors will be alerted if available.'
FAILED_MESSAGE = "Failed to submit request. If you're offline, the sample UI will still work."

# Sign-less groups; 'A ' in a query string is an unescaped 'A+'
BLOOD_GROUPS = ('A', 'B', 'AB', 'O')


def get_feed():
    return current_app.extensions['request_feed']


def _normalized(criteria):
    """Canonical blood type and urgency spelling; ValueError when either is not a known value."""
    if criteria.blood_type:
        criteria.blood_type = BloodType.parse(criteria.blood_type).value
    if criteria.urgency:
        criteria.urgency = Urgency.parse(criteria.urgency).value
    return criteria


def _query_filters(args, stored):
    """Query-string filters override the stored ones, key by key."""
    if not any(key in args for key in ('city', 'bloodType', 'urgency')):
        return stored

    blood_type = args.get('bloodType', stored.blood_type)
    if blood_type.endswith(' ') and blood_type.strip().upper() in BLOOD_GROUPS:
        blood_type = blood_type.strip() + '+'

    return _normalized(FilterState(
        city=args.get('city', stored.city).strip(),
        blood_type=blood_type.strip(),
        urgency=args.get('urgency', stored.urgency).strip(),
    ))


# GET the filtered feed
@blood_request_bp.route('/', methods=['GET'])
def get_requests():
    try:
        feed = get_feed()
        try:
            criteria = _query_filters(request.args, feed.filters)
        except ValueError as e:
            raise BadRequest(str(e))

        visible = feed.visible_requests(criteria)
        return jsonify({
            'requests': [r.to_view() for r in visible],
            'total': len(feed.requests),
            'filters': criteria.to_dict(),
            'poll': feed.poll_status(),
        }), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400


# POST a new blood request
@blood_request_bp.route('/', methods=['POST'])
def create_request():
    try:
        data = request.get_json(silent=True)
        if not data or not isinstance(data, dict):
            raise BadRequest('No input data provided')

        required_fields = ['patientName', 'bloodType', 'city', 'urgency']
        for field in required_fields:
            if not data.get(field):
                raise BadRequest(f'Missing required field: {field}')

        try:
            blood_request = get_feed().create_request(data)
        except ValueError as e:
            raise BadRequest(str(e))

        if blood_request.status == BloodRequest.STATUS_FAILED:
            # The entry stays in the feed; only the user is told
            return jsonify({'request': blood_request.to_view(), 'message': FAILED_MESSAGE}), 502
        return jsonify({'request': blood_request.to_view(), 'message': SUBMITTED_MESSAGE}), 201
    except BadRequest as e:
        return jsonify({'error': e.description}), 400


# Poll the backend right now instead of waiting for the next tick
@blood_request_bp.route('/refresh', methods=['POST'])
def refresh_requests():
    feed = get_feed()
    applied = feed.load_requests()
    return jsonify({
        'refreshed': applied,
        'total': len(feed.requests),
        'poll': feed.poll_status(),
    }), 200


@blood_request_bp.route('/filters', methods=['GET'])
def get_filters():
    return jsonify(get_feed().filters.to_dict()), 200


# PUT replaces the stored filters; omitted keys become wildcards
@blood_request_bp.route('/filters', methods=['PUT'])
def update_filters():
    try:
        data = request.get_json(silent=True)
        if data is None or not isinstance(data, dict):
            raise BadRequest('No input data provided')
        try:
            criteria = get_feed().set_filters(_normalized(FilterState.from_dict(data)))
        except ValueError as e:
            raise BadRequest(str(e))
        return jsonify(criteria.to_dict()), 200
    except BadRequest as e:
        return jsonify({'error': e.description}), 400
