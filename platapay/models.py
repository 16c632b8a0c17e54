# models.py

import uuid
from . import db
from datetime import datetime
# --------------------------------------------------

# This file defines the structure of the database tables using Python classes.
# Supabase Auth owns the users themselves; we only keep what the portal needs.


def _new_uuid():
    return str(uuid.uuid4())


# --- 1. PROFILE MODEL ---

class Profile(db.Model):
    """
    Portal profile for a Supabase Auth user.

    Created just-in-time on the user's first authenticated request.
    The role decides which dashboard the user gets: 'admin' or 'agent'.
    """
    __tablename__ = 'user_profiles'

    # Supabase UUID from the JWT 'sub' claim
    user_id = db.Column(db.String(36), primary_key=True)
    email = db.Column(db.String(120), index=True, nullable=False)
    display_name = db.Column(db.String(128))
    role = db.Column(db.String(10), nullable=False, default='agent')
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "user_id": self.user_id,
            "email": self.email,
            "display_name": self.display_name,
            "role": self.role,
        }

    def __repr__(self):
        return f'<Profile {self.email} ({self.role})>'


# --- 2. AGENT MODEL ---

class Agent(db.Model):
    """
    An agent application. Only 'approved' agents appear on the public map.
    """
    __tablename__ = 'agents'

    id = db.Column(db.String(36), primary_key=True, default=_new_uuid)
    # Short reference shown to the applicant (see utils.tokens)
    application_id = db.Column(db.String(8), unique=True, nullable=False)

    name = db.Column(db.String(128), nullable=False)
    email = db.Column(db.String(120), index=True, nullable=False)
    phone = db.Column(db.String(32), nullable=False)
    address = db.Column(db.String(256), nullable=False)
    business_name = db.Column(db.String(128), nullable=False)
    business_type = db.Column(db.String(64), nullable=False)
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)
    additional_info = db.Column(db.Text)

    # 'pending' until an admin approves or rejects it
    status = db.Column(db.String(10), nullable=False, default='pending', index=True)

    user_id = db.Column(db.String(36), db.ForeignKey('user_profiles.user_id'), nullable=True, index=True)

    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)

    def to_dict(self):
        return {
            "id": self.id,
            "application_id": self.application_id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "business_name": self.business_name,
            "business_type": self.business_type,
            "location": {"latitude": self.latitude, "longitude": self.longitude},
            "additional_info": self.additional_info,
            "status": self.status,
            "user_id": self.user_id,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    def to_feature(self):
        """GeoJSON Point feature with public contact details only."""
        return {
            "type": "Feature",
            "geometry": {
                "type": "Point",
                "coordinates": [self.longitude, self.latitude],
            },
            "properties": {
                "id": self.id,
                "name": self.name,
                "address": self.address,
                "phone": self.phone,
                "email": self.email,
            },
        }

    def __repr__(self):
        return f'<Agent {self.application_id} {self.name} ({self.status})>'
