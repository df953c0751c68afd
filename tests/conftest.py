import json

import pytest
from fastapi.testclient import TestClient

from api.main import app
from api.schemas.dataset import AffectedDataset


def make_dataset(*entries: tuple[str, str]) -> AffectedDataset:
    return AffectedDataset(
        crawled_at="2025-11-26T10:47:43Z",
        total_packages=len(entries),
        source_url="https://example.com/advisories",
        packages=[{"package_name": n, "version": v} for n, v in entries],
    )


@pytest.fixture
def left_pad_dataset():
    return make_dataset(("left-pad", "1.3.0"), ("left-pad", "1.3.1"))


@pytest.fixture
def scoped_dataset():
    return make_dataset(
        ("@asyncapi/cli", "4.1.2"),
        ("@asyncapi/cli", "4.1.3"),
        ("02-echo", "0.0.7"),
        ("@posthog/ai", "7.1.2"),
    )


@pytest.fixture
def dataset_file(tmp_path, scoped_dataset):
    path = tmp_path / "affected_packages.json"
    path.write_text(scoped_dataset.model_dump_json(), encoding="utf-8")
    return path


@pytest.fixture
def client(scoped_dataset):
    app.state.affected_dataset = scoped_dataset
    yield TestClient(app)
    app.state.affected_dataset = None


@pytest.fixture
def unloaded_client():
    app.state.affected_dataset = None
    return TestClient(app)


def manifest_text(dependencies=None, dev_dependencies=None, **extra) -> str:
    doc = dict(extra)
    if dependencies is not None:
        doc["dependencies"] = dependencies
    if dev_dependencies is not None:
        doc["devDependencies"] = dev_dependencies
    return json.dumps(doc)
