class PkgCheckError(Exception):
    def __init__(
        self,
        type: str,
        message: str,
        code: str,
        status_code: int,
        param: str | None = None,
    ):
        super().__init__(message)
        self.type = type
        self.message = message
        self.code = code
        self.status_code = status_code
        self.param = param

    @classmethod
    def not_found(cls, resource: str, id: str):
        return cls(
            "not_found",
            f"{resource} '{id}' not found.",
            f"{resource.upper()}_NOT_FOUND",
            404,
        )

    @classmethod
    def malformed_manifest(cls):
        return cls(
            "validation_error",
            "Invalid JSON format. Please check your input.",
            "MALFORMED_MANIFEST",
            400,
            "manifest",
        )

    @classmethod
    def dataset_unavailable(cls, reason: str | None = None):
        message = "Affected packages data not loaded yet."
        if reason:
            message = f"Failed to load affected packages database: {reason}"
        return cls(
            "dataset_error",
            message,
            "DATASET_UNAVAILABLE",
            503,
        )
