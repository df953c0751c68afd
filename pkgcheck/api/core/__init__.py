from api.core.checker import check_packages, cross_reference
from api.core.index import build_affected_index
from api.core.manifest import parse_manifest, validate_manifest_shape

__all__ = [
    "build_affected_index",
    "check_packages",
    "cross_reference",
    "parse_manifest",
    "validate_manifest_shape",
]
