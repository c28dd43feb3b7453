"""Template for the docs/intro.md page scaffolded by ``docshome init``."""

INTRO_MD_TEMPLATE = """---
sidebar_position: 1
---

# Introduction

Welcome to the {{ site_title }} documentation.

## Getting Started

Edit `docs/intro.md` to start writing. The landing page links here from
`/docs/intro`.
"""
