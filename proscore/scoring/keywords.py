"""
Static keyword database for resume scoring.

The taxonomy lives in ``data/keywords.yaml`` and is loaded once at import time.
It is never modified at runtime; every lookup returns immutable tuples.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

import yaml

from proscore.scoring.types import ActionVerbCategories, RoleKeywords

logger = logging.getLogger(__name__)

DATA_FILE = Path(__file__).resolve().parent / "data" / "keywords.yaml"

DEFAULT_ROLE = "General"


@lru_cache(maxsize=1)
def load_taxonomy(path: Path = DATA_FILE) -> dict[str, Any]:
    """Parse the keyword taxonomy file."""
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise RuntimeError(f"Failed to read keyword taxonomy '{path}': {exc}") from exc
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in keyword taxonomy '{path}': {exc}") from exc

    if not isinstance(data, dict):
        raise RuntimeError(f"Invalid keyword taxonomy '{path}': expected a top-level mapping.")
    for key in ("action_verbs", "roles", "standard_section_headers", "non_standard_section_headers"):
        if key not in data:
            raise RuntimeError(f"Keyword taxonomy '{path}' is missing '{key}'")
    if DEFAULT_ROLE not in data["roles"]:
        raise RuntimeError(f"Keyword taxonomy '{path}' has no '{DEFAULT_ROLE}' role")

    logger.debug(f"Loaded keyword taxonomy v{data.get('version')} with {len(data['roles'])} roles")
    return data


def _role_keywords(entry: dict[str, list[str]]) -> RoleKeywords:
    return RoleKeywords(
        must_have=tuple(entry.get("must_have") or ()),
        important=tuple(entry.get("important") or ()),
        nice_to_have=tuple(entry.get("nice_to_have") or ()),
    )


_taxonomy = load_taxonomy()

TAXONOMY_VERSION: str = str(_taxonomy.get("version", "unversioned"))

ACTION_VERBS = ActionVerbCategories(
    strong=tuple(_taxonomy["action_verbs"]["strong"]),
    medium=tuple(_taxonomy["action_verbs"]["medium"]),
    weak=tuple(_taxonomy["action_verbs"]["weak"]),
)

KEYWORDS_BY_ROLE: dict[str, RoleKeywords] = {
    role: _role_keywords(entry) for role, entry in _taxonomy["roles"].items()
}

STANDARD_SECTION_HEADERS: tuple[str, ...] = tuple(_taxonomy["standard_section_headers"])
NON_STANDARD_HEADERS: tuple[str, ...] = tuple(_taxonomy["non_standard_section_headers"])
QUANTIFICATION_UNITS: tuple[str, ...] = tuple(_taxonomy.get("quantification_units") or ())


def resolve_role(job_role: str) -> str:
    """
    Map a free-form role string onto a database key.

    Tries an exact match, then case-insensitive, then a substring match in
    either direction. Anything else resolves to ``General``. Never raises.
    """
    if not isinstance(job_role, str) or not job_role.strip():
        return DEFAULT_ROLE

    role = job_role.strip()
    if role in KEYWORDS_BY_ROLE:
        return role

    lowered = role.lower()
    for key in KEYWORDS_BY_ROLE:
        if key.lower() == lowered:
            return key

    for key in KEYWORDS_BY_ROLE:
        if key == DEFAULT_ROLE:
            continue
        key_lower = key.lower()
        if key_lower in lowered or lowered in key_lower:
            return key

    logger.info(f"No keyword set for role '{job_role}', falling back to {DEFAULT_ROLE}")
    return DEFAULT_ROLE


def get_keywords_for_role(job_role: str) -> RoleKeywords:
    """Keyword tiers for a role, falling back to ``General``."""
    return KEYWORDS_BY_ROLE[resolve_role(job_role)]


def get_available_roles() -> list[str]:
    return list(KEYWORDS_BY_ROLE.keys())


def is_role_supported(job_role: str) -> bool:
    """True when the role has its own entry (case-insensitive exact match)."""
    if not isinstance(job_role, str):
        return False
    lowered = job_role.strip().lower()
    return any(key.lower() == lowered for key in KEYWORDS_BY_ROLE)
