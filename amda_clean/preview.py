"""Static HTML catalog page bundled at the root of the cleaned archive."""

from __future__ import annotations

from typing import Iterable

from jinja2 import Environment
from markupsafe import Markup

from .manifest import ManifestRow, ReportRow

_jinja_env = Environment(autoescape=True)
Template = _jinja_env.from_string

PREVIEW_CSS = """\
body { margin: 0; padding: 24px; font-family: system-ui, -apple-system, sans-serif;
  background: #0e0e0e; color: #c8c8c8; }
a { color: #7db8e0; text-decoration: none; }
h1 { font-size: 1.5em; font-weight: 500; margin: 0 0 4px; }
h2 { font-size: 1.05em; font-weight: 500; color: #888; border-bottom: 1px solid #222; padding: 10px 0 6px; }
.subtitle { font-size: 0.88em; color: #777; margin-bottom: 24px; }
.grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(200px, 1fr)); gap: 12px; }
.card { background: #161616; border-radius: 6px; overflow: hidden; }
.card img { width: 100%; aspect-ratio: 1; object-fit: cover; display: block; }
.card .missing { aspect-ratio: 1; display: flex; align-items: center; justify-content: center; color: #555; }
.card .body { padding: 8px 12px; font-size: 0.88em; }
.card .org { color: #777; }
.card .notes { color: #b08050; font-size: 0.82em; }
"""

PREVIEW_TEMPLATE = Template("""\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>Artist catalog</title>
<style>{{ css }}</style>
</head>
<body>
<h1>Artist catalog</h1>
<p class="subtitle">{{ artist_count }} artists &middot; {{ countries|length }} countries</p>
{% for country, artists in countries %}
<h2>{{ country }} <span>({{ artists|length }})</span></h2>
<div class="grid">
{% for row, report in artists %}
<div class="card">
  {% if row.hero_path %}<img src="{{ row.hero_path }}" alt="{{ row.name }}" loading="lazy">{% else %}<div class="missing">no hero image</div>{% endif %}
  <div class="body">
    <strong>{{ row.name }}</strong>
    {% if row.organization %}<div class="org">{{ row.organization }}</div>{% endif %}
    <div>
      {% if row.bio_path %}<a href="{{ row.bio_path }}">bio</a>{% endif %}
      {% if row.cv_path %}<a href="{{ row.cv_path }}">cv</a>{% endif %}
      {% if report.num_photos %}&middot; {{ report.num_photos }} photos{% endif %}
    </div>
    {% if report.notes %}<div class="notes">{{ report.notes }}</div>{% endif %}
  </div>
</div>
{% endfor %}
</div>
{% endfor %}
</body>
</html>
""")


def render_preview(artists: Iterable[tuple[ManifestRow, ReportRow]]) -> str:
    """Render the catalog page; image and document links are relative to the archive root."""
    ordered = sorted(artists, key=lambda pair: pair[0].sort_key)
    countries: dict[str, list[tuple[ManifestRow, ReportRow]]] = {}
    for row, report in ordered:
        countries.setdefault(row.country, []).append((row, report))

    return PREVIEW_TEMPLATE.render(
        css=Markup(PREVIEW_CSS),
        artist_count=len(ordered),
        countries=list(countries.items()),
    )
