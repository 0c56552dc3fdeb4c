"""Profile resolution strategies.

Design:
- Every function here is pure: inputs in, profile name (or None) out.
- Strategies run in strict priority order; the first non-empty result wins.
- Absence is None, never an exception. Callers decide on a fallback
  (usually the interactive picker).
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Mapping

from core.constants import PROGRAM_EXTENSIONS
from core.profiles import Profile

LOG = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenDocument:
    """An open program source as seen by the resolver."""
    path: str

    @property
    def file_name(self) -> str:
        return path_segments(self.path)[-1]

    @property
    def is_program(self) -> bool:
        return is_program(self.path)


@dataclass(frozen=True)
class ProfileChoice:
    label: str
    description: str


def path_segments(path: str) -> list[str]:
    """Split a path on the platform separators, keeping empty segments."""
    separators = [os.path.sep]
    if os.path.altsep:
        separators.append(os.path.altsep)
    segments = [path]
    for sep in separators:
        segments = [part for segment in segments for part in segment.split(sep)]
    return segments


def is_program(path: str) -> bool:
    """Return True when the path carries a recognized program extension."""
    ext = os.path.splitext(path_segments(path)[-1])[1].upper()
    return ext in PROGRAM_EXTENSIONS


def profile_from_settings(catalog: Mapping[str, Profile], configured: str | None) -> str | None:
    """Return the configured profile name when the catalog knows it."""
    if configured and configured in catalog:
        return configured
    return None


def profile_from_document_path(path: str, catalog: Mapping[str, Profile]) -> str | None:
    """Derive a profile name from the parent directory of a document path."""
    segments = path_segments(path)
    if len(segments) < 2:
        return None
    candidate = segments[-2]
    if candidate in catalog:
        return candidate
    return None


def profile_from_documents(
    program_name: str,
    catalog: Mapping[str, Profile],
    documents: Iterable[OpenDocument],
) -> str | None:
    """Scan open documents in the supplied order for the program's profile."""
    for doc in documents:
        if not doc.is_program:
            continue
        if doc.file_name != program_name:
            continue
        profile = profile_from_document_path(doc.path, catalog)
        if profile:
            return profile
        LOG.debug("Document %s matches %s but names no known profile", doc.path, program_name)
    return None


def resolve(
    program_name: str,
    catalog: Mapping[str, Profile],
    configured: str | None,
    documents: Iterable[OpenDocument] = (),
) -> str | None:
    """Pick the profile for a program: settings first, then open documents."""
    profile = profile_from_settings(catalog, configured)
    if profile:
        return profile
    return profile_from_documents(program_name, catalog, documents)


def build_choices(catalog: Mapping[str, Profile], default_name: str | None) -> list[ProfileChoice]:
    """Build picker entries; the default profile always comes first."""
    choices: list[ProfileChoice] = []
    for name, profile in catalog.items():
        choice = ProfileChoice(label=name, description=profile.description)
        if name == default_name:
            choices.insert(0, choice)
        else:
            choices.append(choice)
    return choices
