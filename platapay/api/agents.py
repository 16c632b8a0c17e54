# platapay/api/agents.py
# (This file holds the public application, verification and map routes, plus the dashboard.)

from flask import Blueprint, request, jsonify, g
from platapay.jwt_auth import require_jwt
from platapay.utils import _handle_service_result
from platapay.services.agents import submit_application, get_agents_geojson, get_dashboard
from platapay.services.email_service import send_verification_email

bp = Blueprint('agents', __name__)

@bp.route('/agents', methods=['POST'])
def submit_application_route():
    """Public application form submission. Returns the applicant's reference ID."""
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object."}), 400

    result = submit_application(data)
    return _handle_service_result(result)

@bp.route('/agents/geojson', methods=['GET'])
def agents_geojson_route():
    """Approved agents as GeoJSON, consumed by the embeddable map."""
    result = get_agents_geojson()

    # A FeatureCollection is returned as-is; errors come back as a tuple
    if isinstance(result, tuple):
        return _handle_service_result(result)
    return jsonify(result), 200

@bp.route('/dashboard', methods=['GET'])
@require_jwt
def dashboard_route():
    """Admin summary or the agent's own applications, depending on role."""
    result = get_dashboard(g.current_user)
    return _handle_service_result(result)

@bp.route('/send-verification', methods=['POST'])
def send_verification_route():
    """
    Emails an applicant a verification link.

    Request:  {"fullName": "...", "email": "..."}
    """
    data = request.get_json(silent=True)

    if not isinstance(data, dict):
        return jsonify({"success": False, "error": "Request body must be a JSON object."}), 400

    result = send_verification_email(data.get('fullName'), data.get('email'))
    return _handle_service_result(result)
