"""Jinja2 template strings used by docshome."""

from docshome.templates.intro_md_template import INTRO_MD_TEMPLATE
from docshome.templates.page_html_template import PAGE_HTML_TEMPLATE

__all__ = ["INTRO_MD_TEMPLATE", "PAGE_HTML_TEMPLATE"]
