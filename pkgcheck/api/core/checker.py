import logging
from collections.abc import Mapping

from api.core.index import build_affected_index
from api.schemas.check import CheckReport, MatchResult
from api.schemas.dataset import AffectedDataset
from api.schemas.manifest import ManifestFragment

logger = logging.getLogger(__name__)


def cross_reference(
    manifest: ManifestFragment,
    index: Mapping[str, list[str]],
) -> CheckReport:
    """
    Report which declared packages appear in the affected index.

    A match is keyed on the package name only; the declared version spec is
    never compared against the affected versions. Dependencies are walked
    before devDependencies, so a name declared in both keeps the
    dependencies spec as its installed version and gets both flags set.
    """
    all_names: set[str] = set()
    matches: dict[str, MatchResult] = {}

    for name, version in (manifest.dependencies or {}).items():
        all_names.add(name)
        if name in index:
            matches[name] = MatchResult(
                package_name=name,
                installed_version=version,
                affected_versions=list(index[name]),
                is_dependency=True,
                is_dev_dependency=False,
            )

    for name, version in (manifest.dev_dependencies or {}).items():
        all_names.add(name)
        if name not in index:
            continue
        existing = matches.get(name)
        if existing is not None:
            existing.is_dev_dependency = True
        else:
            matches[name] = MatchResult(
                package_name=name,
                installed_version=version,
                affected_versions=list(index[name]),
                is_dependency=False,
                is_dev_dependency=True,
            )

    affected = list(matches.values())
    return CheckReport(
        total_packages=len(all_names),
        affected_packages=affected,
        safe_packages=len(all_names) - len(affected),
    )


def check_packages(manifest: ManifestFragment, dataset: AffectedDataset) -> CheckReport:
    """Index the current dataset and cross-reference the manifest against it."""
    report = cross_reference(manifest, build_affected_index(dataset))
    logger.info(
        "Checked %d packages: %d affected, %d safe",
        report.total_packages,
        len(report.affected_packages),
        report.safe_packages,
    )
    return report
