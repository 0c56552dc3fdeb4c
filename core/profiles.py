"""Connection profiles and the catalog they are listed from.

Design:
- A profile is a name plus display attributes (user, host, port). The
  attributes are never compared; only names take part in resolution.
- SQLite (core.storage) backs the default catalog provider.
- Catalog listing errors propagate to the caller unchanged.
"""
import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass

from core import storage

LOG = logging.getLogger(__name__)

MIN_PORT = 1
MAX_PORT = 65535


@dataclass(frozen=True)
class Profile:
    name: str
    user: str
    host: str
    port: int | None

    @property
    def description(self):
        return f"{self.user}@{self.host}:{self.port}"


class CatalogProvider(ABC):
    """Source of the profiles currently known to the session."""

    @abstractmethod
    def list_profiles(self) -> dict[str, Profile]:
        raise NotImplementedError

    @abstractmethod
    def get_default_profile_name(self) -> str | None:
        raise NotImplementedError


class SqliteCatalogProvider(CatalogProvider):
    """Catalog provider reading profile records from SQLite."""

    def list_profiles(self):
        catalog = {}
        for record in storage.list_profiles():
            catalog[record.name] = Profile(
                name=record.name,
                user=record.user,
                host=record.host,
                port=record.port,
            )
        LOG.debug("Listed %d profiles", len(catalog))
        return catalog

    def get_default_profile_name(self):
        return storage.get_default_profile()


def validate_profile_name(profile_name):
    """Validate a profile name; it must be usable as a directory name."""
    if not profile_name:
        return False, "Profile name cannot be empty."
    name = profile_name.strip()
    if not name:
        return False, "Profile name cannot be empty."
    if name != profile_name:
        return False, "Profile name cannot start or end with spaces."
    if name in {".", ".."}:
        return False, "Profile name is not allowed."
    if "/" in name or "\\" in name:
        return False, "Profile name cannot include path separators."
    if not re.match(r"^[A-Za-z0-9_.-]+$", name):
        return False, "Profile name can only include letters, numbers, _, . or -."
    return True, ""


def _coerce_port(port):
    """Return (port, error) with port as int within range or None."""
    if port in (None, ""):
        return None, ""
    try:
        numeric = int(port)
    except (TypeError, ValueError):
        return None, "Port must be a number."
    if not MIN_PORT <= numeric <= MAX_PORT:
        return None, f"Port must be between {MIN_PORT} and {MAX_PORT}."
    return numeric, ""


def create_profile(profile_name, user="", host="", port=None):
    """
    Register a profile in the catalog.
    Returns (success, message).
    """
    valid, message = validate_profile_name(profile_name)
    if not valid:
        return False, message
    port_value, port_error = _coerce_port(port)
    if port_error:
        return False, port_error
    if storage.get_profile(profile_name):
        return False, "A profile with that name already exists."
    storage.create_profile(profile_name, user.strip(), host.strip(), port_value)
    LOG.info("Profile %s created (%s@%s:%s)", profile_name, user, host, port_value)
    return True, f"Profile '{profile_name}' created."


def delete_profile(profile_name):
    """Remove a profile from the catalog. Returns (success, message)."""
    if not storage.get_profile(profile_name):
        return False, "Profile not found."
    storage.delete_profile(profile_name)
    LOG.info("Profile %s deleted", profile_name)
    return True, f"Profile '{profile_name}' deleted."


def set_default_profile(profile_name):
    """Flag a catalog profile as the default. Returns (success, message)."""
    if profile_name is None:
        storage.set_default_profile(None)
        return True, "Default profile cleared."
    if not storage.get_profile(profile_name):
        return False, "Profile not found."
    storage.set_default_profile(profile_name)
    return True, f"Profile '{profile_name}' is now the default."


def parse_connection(text):
    """Split 'user@host:port' into (user, host, port). Port may be omitted."""
    user, _, rest = (text or "").strip().rpartition("@")
    host, sep, port = rest.rpartition(":")
    if not sep:
        host, port = port, None
    return user, host, port
