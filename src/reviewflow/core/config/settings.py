"""
Main configuration class that composes all configs.
"""

import json
import os

from dotenv import load_dotenv

from reviewflow.core.config.codeowners_config import DEFAULT_CODEOWNERS_PATHS, CodeOwnersConfig
from reviewflow.core.config.github_config import GitHubConfig
from reviewflow.core.config.logging_config import LoggingConfig

# Load environment variables from a .env file
load_dotenv()


class Config:
    """Main configuration class."""

    def __init__(self) -> None:
        self.github = GitHubConfig(
            token=os.getenv("GITHUB_TOKEN", ""),
            api_base_url=os.getenv("GITHUB_API_BASE_URL", "https://api.github.com"),
            timeout=float(os.getenv("GITHUB_TIMEOUT", "30")),
        )

        codeowners_paths = os.getenv("CODEOWNERS_FILE_PATHS")
        try:
            file_paths = json.loads(codeowners_paths) if codeowners_paths else list(DEFAULT_CODEOWNERS_PATHS)
        except json.JSONDecodeError:
            # Fallback to default values if JSON parsing fails
            file_paths = list(DEFAULT_CODEOWNERS_PATHS)

        if not isinstance(file_paths, list) or not all(isinstance(path, str) for path in file_paths):
            # Only a JSON list of strings is usable
            file_paths = list(DEFAULT_CODEOWNERS_PATHS)

        self.codeowners = CodeOwnersConfig(
            file_paths=file_paths,
            dialect=os.getenv("CODEOWNERS_DIALECT", "default"),
        )

        self.logging = LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO"),
            format=os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s"),
            json_logs=os.getenv("LOG_JSON", "false").lower() == "true",
        )

        # Development settings
        self.debug = os.getenv("DEBUG", "false").lower() == "true"
        self.environment = os.getenv("ENVIRONMENT", "development")

    def validate(self) -> bool:
        """Validate configuration."""
        errors = []

        if self.codeowners.dialect.lower() not in {"default", "sectioned"}:
            errors.append("CODEOWNERS_DIALECT must be 'default' or 'sectioned'")

        if errors:
            raise ValueError(f"Configuration errors: {', '.join(errors)}")

        return True


# Global config instance
config = Config()
