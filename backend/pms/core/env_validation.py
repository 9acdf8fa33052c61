"""
Runtime Environment Validation Module

Validates the store, auth and assessment configuration at application startup.
If validation fails, the application refuses to start (hard fail).
"""

import os
import sys
from typing import Optional

from pydantic import ValidationError

from pms.core.config import (
    AssessmentProvider,
    AuthProvider,
    Settings,
    StoreBackendKind,
)


def _fail(message: str, hint: Optional[str] = None) -> None:
    print(f"❌ FATAL: {message}", file=sys.stderr)
    if hint:
        print(f"   {hint}", file=sys.stderr)
    sys.exit(1)


def validate_environment(settings: Optional[Settings] = None) -> Settings:
    """
    Validate configuration before the FastAPI app starts.

    Returns:
        Settings: Validated settings object

    Raises:
        SystemExit: If validation fails (exit code 1)
    """
    try:
        settings = settings or Settings()
    except ValidationError as e:
        print("❌ FATAL: Environment validation failed", file=sys.stderr)
        print("\nMissing or invalid environment variables:", file=sys.stderr)
        for error in e.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            print(f"   • {field}: {error['msg']}", file=sys.stderr)
        print("\nPlease check your .env file or environment variables.", file=sys.stderr)
        sys.exit(1)

    # 1. CORS: no wildcard outside debug mode
    if not settings.debug:
        origins = [o.strip() for o in settings.allowed_origins.split(",")]
        if "*" in origins:
            _fail(
                "Wildcard CORS origin (*) detected in production mode.",
                "Set ALLOWED_ORIGINS to specific domains (comma-separated).",
            )

    # 2. Record store
    if settings.store_backend == StoreBackendKind.SQL and not settings.database_url:
        _fail("DATABASE_URL required when STORE_BACKEND=sql")
    if settings.store_backend == StoreBackendKind.MEMORY and not settings.debug:
        print(
            "⚠️  STORE_BACKEND=memory: the record is lost when the process exits.",
            file=sys.stderr,
        )

    # 3. Auth
    if settings.auth_provider == AuthProvider.FIREBASE:
        if not settings.firebase_project_id:
            _fail("FIREBASE_PROJECT_ID required when AUTH_PROVIDER=firebase")
        if settings.google_application_credentials and not os.path.exists(
            settings.google_application_credentials
        ):
            _fail(
                f"Firebase credentials file not found: {settings.google_application_credentials}"
            )

    # 4. External assessment
    if settings.assessment_provider == AssessmentProvider.GEMINI and not settings.gemini_api_key:
        _fail("GEMINI_API_KEY required when ASSESSMENT_PROVIDER=gemini")
    if settings.assessment_timeout_seconds <= 0:
        _fail("ASSESSMENT_TIMEOUT_SECONDS must be positive")

    print("✅ Environment validation passed")
    print(f"   App: {settings.app_name}")
    print(f"   Store: {settings.store_backend.value}")
    print(f"   Assessment: {settings.assessment_provider.value}")

    return settings


if __name__ == "__main__":
    validate_environment()
    print("\n✅ All environment variables are valid!")
