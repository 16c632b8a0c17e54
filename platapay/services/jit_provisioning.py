# platapay/services/jit_provisioning.py
"""
Just-in-Time Profile Provisioning Service

Authenticated users (verified via Supabase JWT) get a row in the
user_profiles table on their first request. Email is kept in sync with the
token on later requests; the role is owned by the profile and never taken
from the token.
"""

from flask import current_app
from platapay import db
from platapay.models import Profile
from sqlalchemy.exc import IntegrityError, OperationalError


class JITProvisioningError(Exception):
    """Custom exception for JIT provisioning failures"""
    def __init__(self, message, original_error=None):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


def ensure_profile_synced(user_id, email, display_name):
    """
    Ensures a profile exists for the user and its email is current.

    Args:
        user_id (str): Supabase UUID from JWT 'sub' claim
        email (str): Email from JWT 'email' claim
        display_name (str): Name used when the profile is first created

    Returns:
        Profile: The synchronized Profile ORM object

    Raises:
        JITProvisioningError: If database sync fails
    """
    try:
        profile = db.session.get(Profile, user_id)

        if profile is None:
            current_app.logger.info(f"JIT Provisioning: Creating profile for {email} (ID: {user_id})")

            try:
                profile = Profile(
                    user_id=user_id,
                    email=email,
                    display_name=display_name,
                    role=current_app.config['DEFAULT_ROLE'],
                )
                db.session.add(profile)
                db.session.commit()
                return profile

            except IntegrityError as e:
                # Another request created the profile first
                db.session.rollback()
                current_app.logger.warning(
                    f"JIT Provisioning: Race condition detected for {email}. Retrying query."
                )
                profile = db.session.get(Profile, user_id)
                if profile is None:
                    raise JITProvisioningError(
                        f"Failed to create profile for {email} due to integrity constraint",
                        original_error=e
                    )

        if profile.email != email:
            current_app.logger.info(
                f"JIT Provisioning: Syncing email for {user_id}: {profile.email} → {email}"
            )
            profile.email = email
            db.session.commit()

        return profile

    except OperationalError as e:
        db.session.rollback()
        current_app.logger.error(
            f"JIT Provisioning: Database connection error for {email}. Error: {str(e)}"
        )
        raise JITProvisioningError(
            "Database connection failed during profile provisioning",
            original_error=e
        )
