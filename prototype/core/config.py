
from pydantic import Field
from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    """Application configuration loaded from environment variables / .env file."""

    app_name: str = "Versioned Prototype"
    app_env: str = "development"
    app_port: int = 8000

    # Each entry is mounted as its own sub-application at /<version>
    versions: list[str] = Field(default=["v1", "v2"], alias="VERSIONS")

    # Status used by rewritten redirects when the handler doesn't pass one
    redirect_status_code: int = Field(
        default=302, alias="REDIRECT_STATUS_CODE",
    )  # 302 | 303 | 307

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "populate_by_name": True,
    }

    @property
    def mount_paths(self) -> list[str]:
        """Mount prefix for each configured version, e.g. ``/v1``."""
        return ["/" + v.strip("/") for v in self.versions]

settings = Settings()
