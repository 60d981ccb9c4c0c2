"""HTML templates for page views.

Templates are parsed once when ``PageTemplates`` is constructed. A missing
or malformed template fails construction, so a broken template set stops
the application at startup instead of on the first request.
"""

from pathlib import Path

from jinja2 import (
    BaseLoader,
    Environment,
    FileSystemLoader,
    PackageLoader,
    StrictUndefined,
    Template,
    select_autoescape,
)

from flatwiki.core.store import Page

TEMPLATE_NAMES = ("edit", "view")


class PageTemplates:
    """Parsed ``view`` and ``edit`` templates.

    By default the templates bundled with the package are used. Passing
    ``templates_dir`` loads ``view.html`` and ``edit.html`` from that
    directory instead.
    """

    def __init__(self, templates_dir: Path | None = None) -> None:
        """Load and parse all templates.

        Args:
            templates_dir: Directory with replacement templates (optional)

        Raises:
            jinja2.TemplateNotFound: If a template file is missing
            jinja2.TemplateSyntaxError: If a template cannot be parsed
        """
        loader: BaseLoader
        if templates_dir is None:
            loader = PackageLoader("flatwiki", "templates")
        else:
            loader = FileSystemLoader(templates_dir)

        self._templates_dir = templates_dir
        self._env = Environment(
            loader=loader,
            autoescape=select_autoescape(default=True),
            undefined=StrictUndefined,
            auto_reload=False,
        )
        self._templates: dict[str, Template] = {
            name: self._env.get_template(f"{name}.html") for name in TEMPLATE_NAMES
        }

    @property
    def templates_dir(self) -> Path | None:
        """Override directory, or None for the bundled templates."""
        return self._templates_dir

    def render(self, name: str, page: Page) -> str:
        """Render a template with a page as its context.

        Args:
            name: Template name ("view" or "edit")
            page: Page exposed to the template as ``page``

        Returns:
            Rendered HTML

        Raises:
            KeyError: If name is not a known template
            jinja2.TemplateError: If rendering fails
        """
        return self._templates[name].render(page=page)
