"""Template engine strategies.

Implements placeholder detection and tab-stop annotation for environment
templates.
"""

from env_creator.strategies.template_engine.processor import TemplateProcessor
from env_creator.strategies.template_engine.snippet import render_snippet

__all__ = [
    "TemplateProcessor",
    "render_snippet",
]
