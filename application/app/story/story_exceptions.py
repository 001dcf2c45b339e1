
class StoryDecodeException(Exception):
    """
    Exception raised when a serialized story cannot be decoded.
    """
    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Unable to decode story: {self.reason}")

class ChapterRenderException(Exception):
    """
    Exception raised when the configured template cannot be applied to a chapter.
    """
    def __init__(self, chapter_title: str, reason: str):
        self.chapter_title = chapter_title
        self.reason = reason
        super().__init__(f"Failed to render chapter '{self.chapter_title}': {self.reason}")
