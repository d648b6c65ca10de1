"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Select adapter backends (AWS vs in-memory) for identity, policies, storage

Collaborators:
  - api/main.py: reads settings for CORS and startup validation
  - container.py: reads settings to compose adapters and clients
  - identity/cognito_auth.py: reads user pool / client id for token checks

Constraints:
  - Lives in API/infrastructure layer, NOT in domain/application
  - No business logic — pure configuration

Notes:
  - Uses pydantic-settings for env parsing and validation
  - Singleton via lru_cache
"""

from functools import lru_cache

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKENDS_AWS = {"aws", "memory"}
_BACKENDS_STORAGE = {"memory", "dynamodb"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_env: Application environment (development/test/production)
        log_level: Root level for the JSON logger
        log_json: Emit JSON lines (False = plain text, handy locally)
        allowed_origins: Comma-separated CORS origins
        cors_allow_credentials: Allow cookies cross-origin
        aws_region: Region for Cognito / Verified Permissions / DynamoDB
        user_pool_id: Cognito user pool (identity directory id)
        user_pool_client_id: Expected audience / client_id of caller tokens
        policy_store_id: Verified Permissions policy store
        policy_page_size: maxResults per ListPolicies page (1..50)
        policy_max_results: Hard cap of grants materialized per query
        aws_connect_timeout_seconds: Connect timeout for every SDK call
        aws_read_timeout_seconds: Read timeout for every SDK call
        identity_backend: aws | memory
        policy_backend: aws | memory
        storage_backend: memory | dynamodb
        notebooks_table: DynamoDB table name for notebooks
        dynamodb_endpoint_url: Optional endpoint (DynamoDB Local)
        dev_seed_notebooks: Seed the in-memory store with demo notebooks
    """

    # Environment
    app_env: str = "development"
    log_level: str = "INFO"
    log_json: bool = True

    # CORS configuration
    allowed_origins: str = "http://localhost:5173"
    cors_allow_credentials: bool = True

    # AWS
    aws_region: str = "us-east-1"
    user_pool_id: str = ""
    user_pool_client_id: str = ""
    policy_store_id: str = ""

    # Policy store paging
    policy_page_size: int = 20
    policy_max_results: int = 200

    # Timeouts (no internal retries: callers retry the whole operation)
    aws_connect_timeout_seconds: float = 3.0
    aws_read_timeout_seconds: float = 5.0

    # Backends
    identity_backend: str = "aws"
    policy_backend: str = "aws"
    storage_backend: str = "memory"

    # Storage - DynamoDB
    notebooks_table: str = "notebooks"
    dynamodb_endpoint_url: str = ""

    # Dev Tools
    dev_seed_notebooks: bool = False

    @field_validator("policy_page_size")
    @classmethod
    def policy_page_size_in_range(cls, v: int) -> int:
        if v < 1 or v > 50:
            raise ValueError("policy_page_size must be between 1 and 50")
        return v

    @field_validator("policy_max_results")
    @classmethod
    def policy_max_results_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("policy_max_results must be greater than 0")
        return v

    @field_validator("aws_connect_timeout_seconds", "aws_read_timeout_seconds")
    @classmethod
    def timeouts_must_be_positive(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("AWS timeouts must be greater than 0")
        return v

    @field_validator("identity_backend", "policy_backend")
    @classmethod
    def aws_backend_valid(cls, v: str) -> str:
        backend = (v or "aws").strip().lower()
        if backend not in _BACKENDS_AWS:
            raise ValueError("backend must be aws or memory")
        return backend

    @field_validator("storage_backend")
    @classmethod
    def storage_backend_valid(cls, v: str) -> str:
        backend = (v or "memory").strip().lower()
        if backend not in _BACKENDS_STORAGE:
            raise ValueError("storage_backend must be memory or dynamodb")
        return backend

    @model_validator(mode="after")
    def validate_production_requirements(self):
        if not self.is_production():
            return self

        if self.identity_backend == "aws" and not self.user_pool_id.strip():
            raise ValueError("USER_POOL_ID is required in production")
        if self.policy_backend == "aws" and not self.policy_store_id.strip():
            raise ValueError("POLICY_STORE_ID is required in production")
        if self.dev_seed_notebooks:
            raise ValueError("DEV_SEED_NOTEBOOKS must be false in production")
        return self

    def get_allowed_origins_list(self) -> list[str]:
        """Parse comma-separated origins into a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    def is_production(self) -> bool:
        return self.app_env.strip().lower() == "production"

    def is_test(self) -> bool:
        return self.app_env.strip().lower() in {"test", "testing", "ci"}

    @property
    def cognito_issuer(self) -> str:
        return f"https://cognito-idp.{self.aws_region}.amazonaws.com/{self.user_pool_id}"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
    """
    return Settings()
