"""Template for the HTML document shell around a rendered page."""

PAGE_HTML_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{{ document_title }}</title>
<meta name="description" content="{{ description }}">
<meta property="og:title" content="{{ document_title }}">
<meta property="og:description" content="{{ description }}">
{% if canonical_url %}
<link rel="canonical" href="{{ canonical_url }}">
{% endif %}
{% if favicon %}
<link rel="icon" href="{{ favicon }}">
{% endif %}
</head>
<body>
{{ body }}
</body>
</html>
"""
