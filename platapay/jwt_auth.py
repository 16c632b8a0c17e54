"""
JWT Authentication Middleware for Supabase Integration

This module verifies Supabase access tokens and exposes the caller's
portal profile (including its role) to route handlers via Flask's g.
"""

import jwt
from functools import wraps
from dataclasses import dataclass
from flask import request, jsonify, g, current_app
from platapay.services.jit_provisioning import ensure_profile_synced, JITProvisioningError


class JWTAuthError(Exception):
    """Custom exception for JWT authentication errors"""
    def __init__(self, message, status_code=401):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


@dataclass
class UserContext:
    """
    Lightweight user context built from the verified token and the
    user's portal profile.
    """
    id: str             # From JWT 'sub' claim (Supabase UUID)
    email: str          # From JWT 'email' claim
    display_name: str   # From profile (seeded from user_metadata.name)
    role: str           # From profile: 'admin' or 'agent'

    @property
    def is_admin(self):
        return self.role == 'admin'


def extract_token_from_header():
    """
    Extracts the JWT token from the Authorization header.

    Expected format: "Authorization: Bearer <token>"

    Raises:
        JWTAuthError: If Authorization header is missing or malformed
    """
    auth_header = request.headers.get('Authorization')

    if not auth_header:
        raise JWTAuthError("Missing Authorization header", 401)

    parts = auth_header.split()

    if len(parts) != 2 or parts[0].lower() != 'bearer':
        raise JWTAuthError("Invalid Authorization header format. Expected 'Bearer <token>'", 401)

    return parts[1]


def verify_supabase_token(token):
    """
    Verifies a Supabase JWT token and returns its claims.

    Raises:
        JWTAuthError: If token is invalid, expired, or verification fails
    """
    jwt_secret = current_app.config.get('SUPABASE_JWT_SECRET')

    if not jwt_secret:
        raise JWTAuthError("SUPABASE_JWT_SECRET not configured", 500)

    try:
        return jwt.decode(
            token,
            jwt_secret,
            algorithms=['HS256'],
            audience='authenticated',  # Supabase default audience
            options={
                'verify_exp': True,
                'verify_aud': True,
            }
        )

    except jwt.ExpiredSignatureError:
        raise JWTAuthError("Token has expired", 401)
    except jwt.InvalidAudienceError:
        raise JWTAuthError("Invalid token audience", 401)
    except jwt.InvalidTokenError as e:
        raise JWTAuthError(f"Invalid token: {str(e)}", 401)


def create_user_context_from_token(payload):
    """
    Creates a UserContext from a verified token payload.

    The profile is provisioned on first sight with the default role; after
    that the role stored in the profile is authoritative, so admins can
    promote users without touching Supabase.

    Raises:
        JWTAuthError: If required claims are missing or provisioning fails
    """
    user_id = payload.get('sub')
    email = payload.get('email')
    user_metadata = payload.get('user_metadata') or {}

    if not user_id:
        raise JWTAuthError("Token missing 'sub' claim", 401)

    if not email:
        raise JWTAuthError("Token missing 'email' claim", 401)

    display_name = user_metadata.get('name') or email

    try:
        profile = ensure_profile_synced(
            user_id=user_id,
            email=email,
            display_name=display_name,
        )
    except JITProvisioningError as e:
        current_app.logger.error(
            f"Authentication failed for {email} ({user_id}): "
            f"JIT provisioning error: {e.message}"
        )
        raise JWTAuthError("User provisioning failed. Please contact support.", 401)

    return UserContext(
        id=profile.user_id,
        email=profile.email,
        display_name=profile.display_name,
        role=profile.role,
    )


def require_jwt(f):
    """
    Decorator to protect routes with JWT authentication.

    Usage:
        @bp.route('/protected')
        @require_jwt
        def protected_route():
            user = g.current_user
            return jsonify({"message": f"Hello {user.display_name}"})

    Error Responses:
        401: Missing, invalid, or expired token
        500: Server error during authentication
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        try:
            token = extract_token_from_header()
            payload = verify_supabase_token(token)
            g.current_user = create_user_context_from_token(payload)
        except JWTAuthError as e:
            return jsonify({"message": e.message}), e.status_code

        return f(*args, **kwargs)

    return decorated_function


def admin_required(f):
    """
    Decorator to require the 'admin' role. Must be used AFTER @require_jwt.

    Usage:
        @bp.route('/admin-only')
        @require_jwt
        @admin_required
        def admin_route():
            return jsonify({"message": "Admin access granted"})
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        user = getattr(g, 'current_user', None)

        if not user:
            return jsonify({"message": "Authentication required."}), 401

        if not user.is_admin:
            return jsonify({"message": "Permission denied: Admin access required."}), 403

        return f(*args, **kwargs)

    return decorated_function
