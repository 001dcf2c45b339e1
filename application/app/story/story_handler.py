import io
import logging
from dataclasses import dataclass, replace
from typing import Callable

from fastapi import Request
from fastapi.responses import PlainTextResponse, Response
from jinja2 import Template

from application.app.story.key_derivation import KeyDeriver, derive_key
from application.app.story.renderer import DEFAULT_TEMPLATE, compile_template, render_chapter
from application.app.story.story_exceptions import ChapterRenderException
from domain.story import Story

logger = logging.getLogger(__name__)

NOT_FOUND_MESSAGE = "Chapter not found."
INTERNAL_ERROR_MESSAGE = "Something went wrong..."

@dataclass
class HandlerConfig:
    """Settings of a StoryHandler, only changed by handler options while it is built."""
    template: Template = DEFAULT_TEMPLATE
    media_type: str = "text/html"
    derive_key: KeyDeriver = derive_key

HandlerOption = Callable[[HandlerConfig], None]

def with_template(template: Template | str, media_type: str = "text/html") -> HandlerOption:
    """Render chapters with another template. Template text is compiled first."""
    if isinstance(template, str):
        template = compile_template(template)

    def apply(config: HandlerConfig):
        config.template = template
        config.media_type = media_type
    return apply

def with_key_deriver(deriver: KeyDeriver) -> HandlerOption:
    """Use another function to get the chapter key from a request."""
    def apply(config: HandlerConfig):
        config.derive_key = deriver
    return apply

class StoryHandler:
    """
    Serves the chapters of a story, one request at a time.
    Holds no per-request state: the story and the configuration are only read
    once the handler is built, so concurrent requests can share it.
    """
    def __init__(self, story: Story, *options: HandlerOption):
        config = HandlerConfig()
        for option in options:
            option(config)

        self._story = story
        self._config = replace(config)

    @property
    def story(self) -> Story:
        return self._story

    @property
    def template(self) -> Template:
        return self._config.template

    @property
    def media_type(self) -> str:
        return self._config.media_type

    @property
    def derive_key(self) -> KeyDeriver:
        return self._config.derive_key

    def serve(self, request: Request) -> Response:
        """
        Find the chapter named by the request and render it.
        Answers 404 when the story has no such chapter and 500 when rendering fails.
        """
        key = self.derive_key(request)
        chapter = self._story.get(key)
        if chapter is None:
            logger.info(f"Chapter '{key}' not found for path '{request.url.path}'")
            return PlainTextResponse(NOT_FOUND_MESSAGE, status_code=404)

        # Rendered into memory first: a failed render must not leave a partial page in the response.
        buffer = io.StringIO()
        try:
            render_chapter(buffer, chapter, self.template)
        except ChapterRenderException as e:
            logger.exception(f"Error rendering chapter '{key}': {e}")
            return PlainTextResponse(INTERNAL_ERROR_MESSAGE, status_code=500)

        logger.debug(f"Rendered chapter '{key}'")
        return Response(buffer.getvalue(), media_type=self.media_type)
