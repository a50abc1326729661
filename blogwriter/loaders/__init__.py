"""Data loading: prompt templates."""

from blogwriter.loaders.templates import TemplateStore, render

__all__ = [
    "TemplateStore",
    "render",
]
