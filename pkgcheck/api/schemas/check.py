from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class MatchResult(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    package_name: str
    installed_version: str
    affected_versions: list[str]
    is_dependency: bool
    is_dev_dependency: bool


class CheckReport(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "examples": [
                {
                    "totalPackages": 3,
                    "affectedPackages": [
                        {
                            "packageName": "left-pad",
                            "installedVersion": "^1.3.0",
                            "affectedVersions": ["1.3.0", "1.3.1"],
                            "isDependency": True,
                            "isDevDependency": True,
                        }
                    ],
                    "safePackages": 2,
                }
            ]
        },
    )

    total_packages: int
    affected_packages: list[MatchResult]
    safe_packages: int
