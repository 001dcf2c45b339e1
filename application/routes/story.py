from application.app.story.story_handler import StoryHandler
from fastapi import APIRouter, Request
from fastapi.responses import Response

HTTP_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

def create_story_router(handler: StoryHandler) -> APIRouter:
    """
    Build a router sending every path, whatever the method, to the story handler.
    """
    router = APIRouter()

    @router.api_route("/{path:path}", methods=HTTP_METHODS, include_in_schema=False)
    def read_chapter(request: Request) -> Response:
        """
        Serve the chapter named by the request path.
        A plain function so each request runs on its own worker thread.
        """
        return handler.serve(request)

    return router
