# platapay/api/system.py
# (This file holds configuration, health and map token routes.)

from flask import Blueprint, jsonify, current_app
from sqlalchemy import text
from platapay import db

bp = Blueprint('system', __name__)

@bp.route('/config/check', methods=['GET'])
def config_check_route():
    """
    Reports which integrations are configured.

    Only presence is exposed, never the values.
    """
    config = current_app.config
    checks = {
        "mapbox": bool(config.get('MAPBOX_TOKEN')),
        "supabase": bool(config.get('SUPABASE_URL') and config.get('SUPABASE_ANON_KEY')),
        "elevenlabs": bool(config.get('ELEVENLABS_API_KEY') and config.get('ELEVENLABS_VOICE_ID')),
        "groq": bool(config.get('GROQ_API_KEY')),
    }

    return jsonify({
        "status": "success",
        "configured": checks,
        "allConfigured": all(checks.values()),
    }), 200

@bp.route('/mapbox/token', methods=['GET'])
def mapbox_token_route():
    """Hands the public Mapbox token to the map embed."""
    token = current_app.config.get('MAPBOX_TOKEN')

    if not token:
        current_app.logger.error("MAPBOX_TOKEN is not configured")
        return jsonify({
            "success": False,
            "error": "Mapbox token not configured on server",
        }), 500

    return jsonify({"success": True, "token": token}), 200

@bp.route('/health', methods=['GET'])
def health_route():
    """Liveness plus database connectivity."""
    try:
        db.session.execute(text('SELECT 1'))
        database_ok = True
    except Exception as e:
        current_app.logger.error(f"Health check database error: {str(e)}")
        database_ok = False

    return jsonify({"status": "ok", "database": database_ok}), 200
