import json
import logging
from decimal import Decimal

from pydantic import ValidationError

from api.schemas.manifest import ManifestFragment

logger = logging.getLogger(__name__)

BUCKETS = ("dependencies", "devDependencies")

SAMPLE_MANIFEST = {
    "dependencies": {
        "next": "15.0.1",
        "react": "18.3.1",
    },
    "devDependencies": {
        "eslint": "^8",
        "typescript": "^5",
    },
}


def _parse_int(literal: str):
    # Integers past the int-string conversion limit still decode.
    try:
        return int(literal)
    except ValueError:
        return Decimal(literal)


def _loads(text: str):
    return json.loads(text, parse_int=_parse_int)


def parse_manifest(text: str) -> ManifestFragment | None:
    """
    Decode pasted package.json content into a ManifestFragment.

    Returns None instead of raising when the text is not valid JSON, or when
    it decodes to something that carries no usable dependency buckets (a
    non-object, or a bucket that is not a name -> version-spec mapping).
    Extra top-level fields are dropped; version specs are kept verbatim.
    """
    try:
        decoded = _loads(text)
    except (ValueError, RecursionError) as e:
        logger.debug("Failed to parse package.json: %s", e)
        return None

    if not isinstance(decoded, dict):
        logger.debug("package.json top level is %s, not an object", type(decoded).__name__)
        return None

    try:
        return ManifestFragment.model_validate(decoded)
    except ValidationError as e:
        logger.debug("package.json has malformed dependency buckets: %s", e)
        return None


def validate_manifest_shape(text: str) -> str | None:
    """Stricter paste-box check: exactly the two buckets, each an object.

    Returns None when the shape is acceptable, otherwise a message for the user.
    """
    raw = (text or "").strip()
    if not raw:
        return "Paste the dependencies and devDependencies of your package.json."

    try:
        parsed = _loads(raw)
    except (ValueError, RecursionError):
        return "Invalid JSON format."

    if not isinstance(parsed, dict):
        return (
            "Top-level JSON must be an object containing only "
            "'dependencies' and 'devDependencies'."
        )

    keys = list(parsed.keys())
    if len(keys) != len(BUCKETS) or not all(k in keys for k in BUCKETS):
        found = ", ".join(keys) or "(none)"
        return (
            "Invalid fields: expected only 'dependencies' and "
            f"'devDependencies', found: {found}"
        )

    for bucket in BUCKETS:
        if not isinstance(parsed[bucket], dict):
            return f"'{bucket}' must be an object (or empty object)."

    return None


def sample_manifest_text() -> str:
    return json.dumps(SAMPLE_MANIFEST, indent=2)
