import logging

from dotenv import load_dotenv

# Load environment variables BEFORE reading the settings
load_dotenv()

from application.app.settings import Settings
from application.app.story.story_handler import HandlerOption, StoryHandler
from application.app.story.story_loader import StoryLoader
from application.routes.story import create_story_router
from domain.story import Story
from fastapi import FastAPI

def create_app(story: Story, *options: HandlerOption) -> FastAPI:
    """Build the application serving a story, with optional handler overrides."""
    # Interactive docs are disabled so that every path reaches the story.
    app = FastAPI(title="Choose Your Own Adventure", docs_url=None, redoc_url=None, openapi_url=None)
    app.include_router(create_story_router(StoryHandler(story, *options)))
    return app

settings = Settings.from_env()

logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

app = create_app(StoryLoader.load_story_from_file(settings.story_file), *settings.handler_options())
