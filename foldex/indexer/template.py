"""Index template loading and placeholder substitution."""

import re

from foldex.storage import IndexSettings
from foldex.vault import VaultStore, normalize_path

DEFAULT_TEMPLATE = "{{content}}\n"

TITLE_PATTERN = re.compile(r"{{\s*title\s*}}", re.IGNORECASE)
CONTENT_PATTERN = re.compile(r"{{\s*content\s*}}", re.IGNORECASE)


class MissingTemplateError(LookupError):
    """A configured template name does not resolve to a document."""

    def __init__(self, template_name: str) -> None:
        super().__init__(f"Template not found: {template_name}")
        self.template_name = template_name


def template_name_for(settings: IndexSettings, is_root: bool) -> str:
    """Configured template for a folder, or '' for the built-in default."""
    if is_root and settings.root_template:
        return settings.root_template
    return settings.index_template


def load_template(store: VaultStore, settings: IndexSettings, is_root: bool) -> str:
    """Load the template text for a folder.

    Raises:
        MissingTemplateError: a template is configured but cannot be resolved.
    """
    name = template_name_for(settings, is_root)
    if not name:
        return DEFAULT_TEMPLATE

    template_path = normalize_path(f"{name}.md")
    document = store.resolve_link(template_path)
    if document is None:
        raise MissingTemplateError(template_path)
    return store.read(document)


def render(template: str, title: str, content: str) -> str:
    """Substitute every {{title}} and {{content}} placeholder."""
    # Callables keep backslashes in titles and links literal.
    text = TITLE_PATTERN.sub(lambda _: title, template)
    return CONTENT_PATTERN.sub(lambda _: content, text)
