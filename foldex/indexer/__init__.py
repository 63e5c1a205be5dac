"""Index reconciliation - decides, renders and writes folder index documents."""

from .links import collect_links, format_link
from .naming import effective_name, index_file_name, is_excluded, is_index_document
from .reconciler import Effect, EffectKind, Reconciler, SkipReason
from .template import DEFAULT_TEMPLATE, MissingTemplateError, load_template, render

__all__ = [
    "DEFAULT_TEMPLATE",
    "Effect",
    "EffectKind",
    "MissingTemplateError",
    "Reconciler",
    "SkipReason",
    "collect_links",
    "effective_name",
    "format_link",
    "index_file_name",
    "is_excluded",
    "is_index_document",
    "load_template",
    "render",
]
