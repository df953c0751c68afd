from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    version: str
    dataset_loaded: bool
    affected_entries: int
