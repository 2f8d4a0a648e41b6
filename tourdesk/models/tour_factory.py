"""Tour creation factory for tourdesk.

This module centralizes tour creation and patching so the required-field
rules are the same wherever tours are built.
"""

import uuid
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from tourdesk.errors import ValidationFailed
from tourdesk.models.constants import TOUR_FIELDS
from tourdesk.models.tour import Tour


def normalize_tour_value(value: Any) -> Optional[str]:
    """Convert a submitted field value to its stored string form.

    Numbers (e.g. a JSON price of 10) become their string form. Strings are kept
    exactly as sent; blank strings and None become None.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return str(value)
    if isinstance(value, str):
        return value if value.strip() else None
    return None


def missing_tour_fields(fields: Mapping[str, Any]) -> List[str]:
    """Return the required tour fields that are absent or blank, in declaration order."""
    return [name for name in TOUR_FIELDS if normalize_tour_value(fields.get(name)) is None]


def create_tour(user_id: str, fields: Mapping[str, Any], now: Optional[datetime] = None) -> Tour:
    """Build a new Tour owned by user_id.

    Any owner or id supplied in fields is ignored: the owner is always the caller.

    Raises:
        ValidationFailed: If any of name, info, image, price is missing or blank
    """
    missing = missing_tour_fields(fields)
    if missing:
        raise ValidationFailed(f"Missing required fields: {', '.join(missing)}")

    now = now or datetime.utcnow()
    return Tour(
        id=str(uuid.uuid4()),
        user_id=user_id,
        created_at=now,
        updated_at=now,
        **{name: normalize_tour_value(fields[name]) for name in TOUR_FIELDS},
    )


def tour_patch_values(patch: Mapping[str, Any]) -> Dict[str, str]:
    """Extract the patchable fields present in patch.

    Unknown keys (including id, user_id and timestamps) are dropped.

    Raises:
        ValidationFailed: If a supplied field is null or blank
    """
    values: Dict[str, str] = {}
    blanked: List[str] = []
    for name in TOUR_FIELDS:
        if name not in patch:
            continue
        value = normalize_tour_value(patch[name])
        if value is None:
            blanked.append(name)
        else:
            values[name] = value
    if blanked:
        raise ValidationFailed(f"Fields cannot be empty: {', '.join(blanked)}")
    return values
