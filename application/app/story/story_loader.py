import json
import logging
from typing import IO, Any

from application.app.story.story_exceptions import StoryDecodeException
from domain.chapter import Chapter, Option
from domain.story import Story

logger = logging.getLogger(__name__)

class StoryLoader():

    @staticmethod
    def load_story_from_json(source: bytes | str | IO) -> Story:
        """
        Decode a JSON story and convert it to a Story object.

        Args:
            source: Raw JSON bytes or text, or a readable file-like object

        Returns:
            Story mapping each chapter key to its Chapter

        Raises:
            StoryDecodeException: If the input is not JSON or does not have the shape of a story
        """
        if hasattr(source, "read"):
            source = source.read()

        try:
            story_data = json.loads(source)
        except (json.JSONDecodeError, UnicodeDecodeError, RecursionError) as e:
            raise StoryDecodeException(f"invalid JSON: {e}") from e
        except TypeError as e:
            raise StoryDecodeException(f"unsupported input: {e}") from e

        if story_data is None:
            return Story()
        if not isinstance(story_data, dict):
            raise StoryDecodeException(f"expected an object of chapters, got {type(story_data).__name__}")

        chapters = {}
        for chapter_key, chapter_data in story_data.items():
            chapters[chapter_key] = StoryLoader._load_chapter(chapter_key, chapter_data)

        logger.debug(f"Decoded story with {len(chapters)} chapters")
        return Story(chapters)

    @staticmethod
    def load_story_from_file(file_path: str) -> Story:
        """
        Load a story from a JSON file.

        Raises:
            FileNotFoundError: If the JSON file doesn't exist
            StoryDecodeException: If the JSON file is malformed
        """
        logger.info(f"Loading story from: {file_path}")
        with open(file_path, "rb") as file:
            return StoryLoader.load_story_from_json(file)

    @staticmethod
    def _load_chapter(chapter_key: str, chapter_data: Any) -> Chapter:
        if chapter_data is None:
            return Chapter()
        if not isinstance(chapter_data, dict):
            raise StoryDecodeException(f"chapter '{chapter_key}' must be an object")

        title = StoryLoader._string_field(chapter_data, "title", f"chapter '{chapter_key}'")

        paragraphs_data = StoryLoader._list_field(chapter_data, "story", f"chapter '{chapter_key}'")
        paragraphs = []
        for paragraph in paragraphs_data:
            if paragraph is None:
                paragraph = ""
            if not isinstance(paragraph, str):
                raise StoryDecodeException(f"chapter '{chapter_key}' has a non-string paragraph")
            paragraphs.append(paragraph)

        options_data = StoryLoader._list_field(chapter_data, "options", f"chapter '{chapter_key}'")
        options = []
        for option_data in options_data:
            if option_data is None:
                options.append(Option())
                continue
            if not isinstance(option_data, dict):
                raise StoryDecodeException(f"chapter '{chapter_key}' has an option that is not an object")
            options.append(Option(
                text=StoryLoader._string_field(option_data, "text", f"option of chapter '{chapter_key}'"),
                target_key=StoryLoader._string_field(option_data, "arc", f"option of chapter '{chapter_key}'")
            ))

        return Chapter(title=title, paragraphs=tuple(paragraphs), options=tuple(options))

    @staticmethod
    def _string_field(data: dict, name: str, owner: str) -> str:
        value = data.get(name)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise StoryDecodeException(f"'{name}' of {owner} must be a string")
        return value

    @staticmethod
    def _list_field(data: dict, name: str, owner: str) -> list:
        value = data.get(name)
        if value is None:
            return []
        if not isinstance(value, list):
            raise StoryDecodeException(f"'{name}' of {owner} must be a list")
        return value
