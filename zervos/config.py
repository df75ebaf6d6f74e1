"""Zervos configuration via pydantic-settings."""

from __future__ import annotations

import logging
import uuid

from pydantic_settings import BaseSettings


class ZervosSettings(BaseSettings):
    environment: str = "development"
    app_title: str = "Zervos Admin API"
    log_level: str = "INFO"

    database_url: str = "sqlite+aiosqlite:///zervos.db"
    echo_sql: bool = False

    cors_origin: str = "http://localhost:5173"

    jwt_secret: str = "supersecret_jwt_key"
    jwt_algorithm: str = "HS256"
    jwt_expires_days: int = 7
    password_hash_iterations: int = 200_000

    # Tenant used when a request does not name an organization
    default_org_id: str = "b8035af1-4c81-40d9-a4ac-143350c3d41f"
    default_org_name: str = "My Company"
    organization_header: str = "X-Organization-Id"

    # Sync batches: one transaction per batch, or one commit per record (legacy).
    sync_atomic_batches: bool = True
    # "legacy": incoming-or-existing with falsy fallback; "presence": sent fields win.
    sync_merge_mode: str = "legacy"

    model_config = {"env_prefix": "ZERVOS_", "env_file": ".env", "extra": "ignore"}

    @property
    def default_org_uuid(self) -> uuid.UUID:
        return uuid.UUID(self.default_org_id)

    @property
    def is_production(self) -> bool:
        return self.environment.strip().lower() in {"prod", "production"}


settings = ZervosSettings()


def configure_logging(level: str | None = None) -> None:
    """Apply the root logging configuration once per process."""
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
