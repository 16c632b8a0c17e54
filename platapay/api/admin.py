# platapay/api/admin.py
# (This file holds all admin review and profile management routes.)

from flask import Blueprint, request, jsonify
from platapay.jwt_auth import require_jwt, admin_required
from platapay.utils import _handle_service_result
from platapay.services.agents import get_agents_by_status, update_agent_status
from platapay.services.profiles import get_all_profiles, update_profile_role

bp = Blueprint('admin', __name__)

@bp.route('/admin/agents', methods=['GET'])
@require_jwt
@admin_required
def list_agents_route():
    """Lists applications by status (?status=pending|approved|rejected)."""
    status = request.args.get('status', 'pending')
    result = get_agents_by_status(status)
    return _handle_service_result(result)

@bp.route('/admin/agents/<agent_id>/status', methods=['POST'])
@require_jwt
@admin_required
def update_agent_status_route(agent_id):
    """Approves or rejects an application."""
    data = request.get_json(silent=True) or {}
    new_status = data.get('status')

    if not new_status:
        return jsonify({"success": False, "error": "Status missing in request body."}), 400

    result = update_agent_status(agent_id, new_status)
    return _handle_service_result(result)

@bp.route('/admin/profiles', methods=['GET'])
@require_jwt
@admin_required
def list_profiles_route():
    """Returns all portal profiles for the admin dashboard."""
    result = get_all_profiles()
    return _handle_service_result(result)

@bp.route('/admin/profiles/<user_id>/role', methods=['POST'])
@require_jwt
@admin_required
def update_profile_role_route(user_id):
    """Updates the role of a specified profile."""
    data = request.get_json(silent=True) or {}
    new_role = data.get('role')

    if not new_role:
        return jsonify({"success": False, "error": "Role missing in request body."}), 400

    result = update_profile_role(user_id, new_role)
    return _handle_service_result(result)
