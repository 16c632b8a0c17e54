# auth.py

from flask import Blueprint, jsonify, g
from platapay.jwt_auth import require_jwt

# Define the Blueprint
bp = Blueprint('auth', __name__)


@bp.route('/me', methods=['GET'])
@require_jwt
def get_current_user():
    """
    Returns the current user's profile.

    The frontend calls this after Supabase login to decide which
    dashboard to show.

    Response:
        200: Profile details with authentication status
        401: Invalid or missing token
    """
    user = g.current_user

    return jsonify({
        "is_authenticated": True,
        "user_id": user.id,
        "email": user.email,
        "display_name": user.display_name,
        "role": user.role,
    }), 200


# NOTE FOR DEVELOPERS:
# Sign-up, sign-in and sign-out are handled entirely by Supabase:
# - Frontend uses the Supabase client library
# - Supabase returns a JWT to the frontend
# - Frontend includes the token in the Authorization header for API requests
# - Backend verifies the token with @require_jwt
