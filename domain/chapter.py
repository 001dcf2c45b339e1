from dataclasses import dataclass

@dataclass(frozen=True)
class Option:
    """Represents a choice offered at the end of a chapter."""
    text: str = ""
    target_key: str = ""

    def to_dict(self):
        return {
            "text": self.text,
            "arc": self.target_key
        }

@dataclass(frozen=True)
class Chapter:
    """
    Represents a single node of a story.
    Paragraphs and options keep their order, options may point to chapters
    that do not exist in the story.
    """
    title: str = ""
    paragraphs: tuple[str, ...] = ()
    options: tuple[Option, ...] = ()

    def to_dict(self):
        return {
            "title": self.title,
            "story": [paragraph for paragraph in self.paragraphs],
            "options": [option.to_dict() for option in self.options]
        }
