from pydantic import BaseModel, ConfigDict

from api.schemas.pagination import PaginationMeta


class AffectedEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    package_name: str
    version: str


class AffectedDataset(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "examples": [
                {
                    "crawled_at": "2025-11-26T10:47:43Z",
                    "total_packages": 2,
                    "source_url": "https://example.com/advisories",
                    "packages": [
                        {"package_name": "left-pad", "version": "1.3.0"},
                        {"package_name": "left-pad", "version": "1.3.1"},
                    ],
                }
            ]
        },
    )

    crawled_at: str
    total_packages: int
    source_url: str
    packages: list[AffectedEntry] = []


class DatasetSummary(BaseModel):
    crawled_at: str
    total_packages: int
    source_url: str
    entries: int
    distinct_packages: int


class AffectedPackageResponse(BaseModel):
    package_name: str
    affected_versions: list[str]


class AffectedPackageListResponse(BaseModel):
    data: list[AffectedPackageResponse]
    pagination: PaginationMeta
