from pydantic import BaseModel, ConfigDict, Field


class ManifestFragment(BaseModel):
    # Unknown top-level fields (name, scripts, ...) are dropped.
    model_config = ConfigDict(extra="ignore")

    dependencies: dict[str, str] | None = None
    dev_dependencies: dict[str, str] | None = Field(
        default=None, alias="devDependencies"
    )


class ManifestRequest(BaseModel):
    manifest: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "manifest": '{"dependencies": {"next": "15.0.1"}, '
                    '"devDependencies": {"eslint": "^8"}}',
                }
            ]
        }
    )


class ManifestValidationResponse(BaseModel):
    valid: bool
    message: str | None = None


class SampleManifestResponse(BaseModel):
    manifest: str
