from api.schemas.dataset import AffectedDataset


def build_affected_index(dataset: AffectedDataset) -> dict[str, list[str]]:
    """
    Map each package name to every affected version recorded for it.

    Versions keep dataset order, duplicates included. The dataset itself is
    not touched.
    """
    index: dict[str, list[str]] = {}
    for entry in dataset.packages:
        if entry.package_name not in index:
            index[entry.package_name] = []
        index[entry.package_name].append(entry.version)
    return index
