from typing import Iterator, TextIO

from jinja2 import Environment, StrictUndefined, Template

from application.app.story.story_exceptions import ChapterRenderException
from domain.chapter import Chapter

DEFAULT_HTML = """<!DOCTYPE html>
<html lang="en">
  <head>
    <meta charset="UTF-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1.0" />
    <title>{{ title }} - Choose Your Own Adventure</title>
    <style>
      body {
        font-family: helvetica, arial;
      }
      h1 {
        text-align: center;
        position: relative;
      }
      .page {
        width: 80%;
        max-width: 500px;
        margin: auto;
        margin-top: 40px;
        margin-bottom: 40px;
        padding: 80px;
        background: #fffcf6;
        border: 1px solid #eee;
        box-shadow: 0 10px 6px -6px #777;
      }
      ul {
        border-top: 1px dotted #ccc;
        padding: 10px 0 0 0;
      }
      li {
        padding-top: 10px;
      }
      a,
      a:visited {
        text-decoration: none;
        color: #6295b5;
      }
      a:active,
      a:hover {
        color: #7792a2;
      }
      p {
        text-indent: 1em;
      }
    </style>
  </head>
  <body>
    <section class="page">
      <h1>{{ title }}</h1>
      {% for paragraph in paragraphs %}
      <p>{{ paragraph }}</p>
      {% endfor %}
      <ul>
        {% for option in options %}
        <li>
          <a href="/{{ option.target_key }}">{{ option.text }}</a>
        </li>
        {% endfor %}
      </ul>
    </section>
  </body>
</html>"""

# Undefined names raise, a template expecting other fields fails to render.
_environment = Environment(autoescape=True, undefined=StrictUndefined)

def compile_template(source: str) -> Template:
    """Compile template text with the same settings as the default template."""
    return _environment.from_string(source)

DEFAULT_TEMPLATE = compile_template(DEFAULT_HTML)

def _generate(chapter: Chapter, template: Template) -> Iterator[str]:
    try:
        yield from template.generate(
            title=chapter.title,
            paragraphs=chapter.paragraphs,
            options=chapter.options
        )
    except Exception as e:
        raise ChapterRenderException(chapter.title, str(e)) from e

def render_chapter(sink: TextIO, chapter: Chapter, template: Template) -> None:
    """
    Write a chapter through a template into a text sink.
    The template receives `title`, `paragraphs` and `options` (each with `text` and `target_key`).

    :raises ChapterRenderException: If the template cannot be applied to the chapter.
    Errors raised by the sink itself are not wrapped.
    """
    for chunk in _generate(chapter, template):
        sink.write(chunk)
