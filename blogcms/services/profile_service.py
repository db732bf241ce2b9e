"""
Profile Service Module

The site owner's profile lives in a single row keyed by PROFILE_ID. Reading
it creates the default row on first access.
"""

from typing import Dict, Any, List
from sqlalchemy.exc import IntegrityError
from blogcms.extensions import db
from blogcms.models.profile import Profile, PROFILE_ID
from blogcms.utils.errors import ConflictError, NotFoundError

DEFAULT_PROFILE = {
    "title": "My Blog",
    "bio": "Welcome to my blog",
    "email": "",
}

FIELDS = ("title", "avatar", "bio", "github", "twitter", "linkedin", "email", "phone", "location")


def _current() -> Profile:
    return Profile.query.filter_by(id=PROFILE_ID).first()


def _apply(profile: Profile, data: Dict[str, Any]) -> None:
    for field in FIELDS:
        if field in data:
            setattr(profile, field, data[field])


def _insert(data: Dict[str, Any]) -> Profile:
    profile = Profile(id=PROFILE_ID)
    _apply(profile, data)
    db.session.add(profile)
    try:
        db.session.commit()
    except IntegrityError:
        # another request created the row first
        db.session.rollback()
        raise ConflictError("Profile already exists, update it instead")
    return profile


def get_profile() -> Dict[str, Any]:
    profile = _current()
    if not profile:
        try:
            profile = _insert(DEFAULT_PROFILE)
        except ConflictError:
            profile = _current()
    return profile.to_dict()


def list_profiles() -> List[Dict[str, Any]]:
    profile = _current()
    return [profile.to_dict()] if profile else []


def create_profile(data: Dict[str, Any]) -> Dict[str, Any]:
    if _current():
        raise ConflictError("Profile already exists, update it instead")
    return _insert(data).to_dict()


def update_profile(data: Dict[str, Any]) -> Dict[str, Any]:
    """Update the profile, creating it from ``data`` when there is none yet."""
    profile = _current()
    if not profile:
        return _insert(data).to_dict()

    _apply(profile, data)
    db.session.commit()
    return profile.to_dict()


def _get_or_404(profile_id: int) -> Profile:
    profile = _current() if profile_id == PROFILE_ID else None
    if not profile:
        raise NotFoundError("Profile not found")
    return profile


def update_profile_by_id(profile_id: int, data: Dict[str, Any]) -> Dict[str, Any]:
    profile = _get_or_404(profile_id)
    _apply(profile, data)
    db.session.commit()
    return profile.to_dict()


def delete_profile(profile_id: int) -> Dict[str, Any]:
    profile = _get_or_404(profile_id)
    view = profile.to_dict()
    db.session.delete(profile)
    db.session.commit()
    return view
