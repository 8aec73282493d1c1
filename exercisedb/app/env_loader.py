"""Load environment variables early for the FastAPI app.

For local dev, loads a .env.dev file. In staging and prod (ENV="staging" or
"prod"), variables are injected by the deployment, so no file is loaded.
"""

import os
import sys
from typing import Literal

from dotenv import load_dotenv
from pydantic import ValidationError

from .settings import Settings

EnvironmentName = Literal["dev", "staging", "prod"]


def validate_env_vars() -> None:
    """Validate that the media settings in the environment can be parsed.

    Raises:
        SystemExit: If any variable holds an invalid value.
    """
    try:
        Settings.from_env()
    except ValidationError as e:
        print(f"ERROR: Invalid environment configuration:\n{e}", file=sys.stderr)
        print(
            "Please fix these variables in your .env file or environment.",
            file=sys.stderr,
        )
        sys.exit(1)


# Load env vars before any app code runs.
env = os.getenv("ENV", "dev")
if env in ("staging", "prod"):
    print(f"Running in {env} environment (env vars from deployment)")
elif env == "dev":
    load_dotenv(".env.dev")
else:
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")

validate_env_vars()


def get_current_environment() -> EnvironmentName:
    """Get the current environment (dev, staging, or prod)."""
    env = os.getenv("ENV", "dev")
    if env in ("dev", "staging", "prod"):
        return env  # type: ignore[return-value]
    raise ValueError(f"Invalid ENV value: {env}. Must be 'dev', 'staging', or 'prod'.")
