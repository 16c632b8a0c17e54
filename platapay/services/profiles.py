# platapay/services/profiles.py
# This file holds all the logic for profile (role) management.

from platapay import db
from platapay.models import Profile


def get_all_profiles():
    """Fetches all portal profiles for the admin dashboard."""
    try:
        profiles = Profile.query.order_by(Profile.created_at).all()
        return {"success": True, "profiles": [profile.to_dict() for profile in profiles]}
    except Exception as e:
        return {"success": False, "error": f"Database error fetching profiles: {str(e)}"}


def update_profile_role(user_id, new_role):
    """
    Updates a profile's role in the database and mirrors it into the
    user's Supabase user_metadata so other Supabase clients see it too.

    The database is authoritative; a failed Supabase update is logged and
    does not undo the change.
    """
    from flask import current_app
    from supabase import create_client

    try:
        if new_role not in current_app.config['ROLES']:
            return {"success": False, "error": "Invalid role specified."}, 400

        profile = db.session.get(Profile, user_id)
        if not profile:
            return {"success": False, "error": "Profile not found."}, 404

        profile.role = new_role
        db.session.commit()

        supabase_url = current_app.config.get('SUPABASE_URL')
        supabase_key = current_app.config.get('SUPABASE_SERVICE_ROLE_KEY')

        if supabase_url and supabase_key:
            try:
                supabase = create_client(supabase_url, supabase_key)
                supabase.auth.admin.update_user_by_id(
                    user_id,
                    {"user_metadata": {"role": new_role}}
                )
                current_app.logger.info(f"Updated Supabase metadata for {profile.email}: role={new_role}")
            except Exception as e:
                current_app.logger.error(
                    f"Failed to update Supabase metadata for {profile.email}: {str(e)}"
                )
        else:
            current_app.logger.warning(
                "Supabase service key not configured - user_metadata not updated."
            )

        return {"success": True, "message": f"Role for {profile.email} updated to {new_role}."}
    except Exception as e:
        db.session.rollback()
        return {"success": False, "error": f"Could not update role: {str(e)}"}
