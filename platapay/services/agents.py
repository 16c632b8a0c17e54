# platapay/services/agents.py
# This file holds all the logic for agent applications and the public map.

from flask import current_app
from sqlalchemy import func
from platapay import db
from platapay.models import Agent
from platapay.utils import generate_application_id, missing_fields

REQUIRED_APPLICATION_FIELDS = (
    'name', 'email', 'phone', 'address', 'business_name', 'business_type',
)

# Retries on application ID collision
_APPLICATION_ID_ATTEMPTS = 5


def _parse_coordinate(value, low, high):
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not (low <= number <= high):
        return None
    return number


def submit_application(data):
    """
    Creates a pending agent application from the public form.

    Returns:
        dict on success, or (error_dict, status_code) on validation errors.
    """
    missing = missing_fields(data, REQUIRED_APPLICATION_FIELDS)
    if missing:
        return {"success": False, "error": f"Missing required fields: {', '.join(missing)}."}, 400

    location = data.get('location')
    if not isinstance(location, dict):
        return {"success": False, "error": "A valid location (latitude, longitude) is required."}, 400

    latitude = _parse_coordinate(location.get('latitude'), -90, 90)
    longitude = _parse_coordinate(location.get('longitude'), -180, 180)
    if latitude is None or longitude is None:
        return {"success": False, "error": "A valid location (latitude, longitude) is required."}, 400

    try:
        application_id = None
        for _ in range(_APPLICATION_ID_ATTEMPTS):
            candidate = generate_application_id(data['email'])
            if not Agent.query.filter_by(application_id=candidate).first():
                application_id = candidate
                break
        if application_id is None:
            return {"success": False, "error": "Could not allocate an application ID."}, 500

        agent = Agent(
            application_id=application_id,
            name=str(data['name']).strip(),
            email=str(data['email']).strip(),
            phone=str(data['phone']).strip(),
            address=str(data['address']).strip(),
            business_name=str(data['business_name']).strip(),
            business_type=str(data['business_type']).strip(),
            latitude=latitude,
            longitude=longitude,
            additional_info=data.get('additional_info'),
        )
        db.session.add(agent)
        db.session.commit()

        current_app.logger.info(f"New agent application {application_id} from {agent.email}")
        return {"success": True, "application_id": application_id, "agent": agent.to_dict()}, 201

    except Exception as e:
        db.session.rollback()
        current_app.logger.error(f"Could not save agent application: {str(e)}")
        return {"success": False, "error": "Could not save application."}, 500


def get_agents_geojson():
    """Approved agents as a GeoJSON FeatureCollection for the map."""
    try:
        agents = Agent.query.filter_by(status='approved').order_by(Agent.created_at).all()
        return {
            "type": "FeatureCollection",
            "features": [agent.to_feature() for agent in agents],
        }
    except Exception as e:
        current_app.logger.error(f"Error generating GeoJSON: {str(e)}")
        return {"success": False, "error": "Failed to generate GeoJSON data"}, 500


def get_agents_by_status(status):
    """Admin listing of applications with the given status."""
    if status not in current_app.config['AGENT_STATUSES']:
        return {"success": False, "error": "Invalid status specified."}, 400

    try:
        agents = Agent.query.filter_by(status=status).order_by(Agent.created_at.desc()).all()
        return {"success": True, "agents": [agent.to_dict() for agent in agents]}
    except Exception as e:
        return {"success": False, "error": f"Database error fetching agents: {str(e)}"}


def update_agent_status(agent_id, new_status):
    """Approves or rejects an application."""
    if new_status not in ('approved', 'rejected'):
        return {"success": False, "error": "Status must be 'approved' or 'rejected'."}, 400

    try:
        agent = db.session.get(Agent, agent_id)
        if not agent:
            return {"success": False, "error": "Agent not found."}, 404

        agent.status = new_status
        db.session.commit()

        current_app.logger.info(f"Agent application {agent.application_id} marked {new_status}")
        return {"success": True, "agent": agent.to_dict()}
    except Exception as e:
        db.session.rollback()
        return {"success": False, "error": f"Could not update status: {str(e)}"}


def get_dashboard(user):
    """
    Dashboard data for the current user.

    Admins get application counts per status; agents get their own
    applications.
    """
    try:
        if user.is_admin:
            rows = db.session.query(Agent.status, func.count(Agent.id)).group_by(Agent.status).all()
            counts = {status: 0 for status in current_app.config['AGENT_STATUSES']}
            counts.update({status: total for status, total in rows})
            return {"success": True, "dashboard": "admin", "counts": counts}

        agents = Agent.query.filter(
            (Agent.user_id == user.id) | (Agent.email == user.email)
        ).order_by(Agent.created_at.desc()).all()
        return {
            "success": True,
            "dashboard": "agent",
            "applications": [agent.to_dict() for agent in agents],
        }
    except Exception as e:
        return {"success": False, "error": f"Database error loading dashboard: {str(e)}"}
