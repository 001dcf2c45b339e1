import os
from dataclasses import dataclass
from typing import List, Optional

from application.app.story.key_derivation import prefixed_key_deriver
from application.app.story.story_handler import HandlerOption, with_key_deriver, with_template

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

@dataclass
class Settings:
    """Process configuration, read from the environment (and a .env file)."""
    story_file: str = os.path.join(BASE_DIR, "static", "gopher.json")
    template_file: Optional[str] = None
    path_prefix: Optional[str] = None
    log_level: str = "INFO"

    @staticmethod
    def from_env() -> "Settings":
        """
        Build the settings from environment variables.
        Relative file paths are resolved against the project folder.
        """
        defaults = Settings()
        return Settings(
            story_file=Settings._resolve(os.getenv("STORY_FILE")) or defaults.story_file,
            template_file=Settings._resolve(os.getenv("STORY_TEMPLATE_FILE")),
            path_prefix=os.getenv("STORY_PATH_PREFIX") or None,
            log_level=os.getenv("LOG_LEVEL", defaults.log_level).upper()
        )

    def handler_options(self) -> List[HandlerOption]:
        """Handler options for the overrides set in the configuration."""
        options = []
        if self.template_file:
            with open(self.template_file, "r", encoding="utf-8") as file:
                options.append(with_template(file.read()))
        if self.path_prefix:
            options.append(with_key_deriver(prefixed_key_deriver(self.path_prefix)))
        return options

    @staticmethod
    def _resolve(path: Optional[str]) -> Optional[str]:
        if not path:
            return None
        return path if os.path.isabs(path) else os.path.join(BASE_DIR, path)
