"""Standalone index.html page."""

from datetime import datetime, timezone

from github_stats_factory.config import Config
from github_stats_factory.models.stats import GitHubStats
from github_stats_factory.templates.readme import CARDS, cards_href
from github_stats_factory.templates.social import social_links
from github_stats_factory.utils.formatting import escape_xml

STYLES = """
    * {
      margin: 0;
      padding: 0;
      box-sizing: border-box;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, 'Segoe UI', 'Noto Sans', Helvetica, Arial, sans-serif;
      background-color: #0d1117;
      color: #c9d1d9;
      line-height: 1.6;
      padding: 20px;
    }

    .container { max-width: 1200px; margin: 0 auto; }

    header {
      text-align: center;
      padding: 20px 0;
      border-bottom: 1px solid #30363d;
      margin-bottom: 20px;
    }

    h1 { font-size: 2.5em; margin-bottom: 10px; color: #58a6ff; }
    h2 { font-size: 1.8em; color: #c9d1d9; text-align: center; }
    .subtitle { font-size: 1.2em; color: #8b949e; }

    .section {
      margin: 40px 0;
      padding: 30px;
      background-color: #161b22;
      border: 1px solid #30363d;
      border-radius: 6px;
    }

    .stats-container {
      display: flex;
      flex-direction: column;
      align-items: center;
      gap: 20px;
      margin: 30px 0;
    }

    .stats-container img { width: 100%; border-radius: 6px; }

    .connect {
      display: flex;
      justify-content: center;
      gap: 15px;
      flex-wrap: wrap;
      margin-top: 20px;
    }

    .connect a { display: inline-flex; align-items: center; transition: transform 0.2s; }
    .connect a:hover { transform: scale(1.1); }
    .connect img { height: 40px; }

    a { color: #58a6ff; text-decoration: none; }
    a:hover { text-decoration: underline; }

    footer {
      text-align: center;
      padding: 40px 0;
      margin-top: 60px;
      border-top: 1px solid #30363d;
      color: #8b949e;
      font-size: 0.9em;
    }

    .updated { text-align: center; color: #8b949e; font-size: 0.9em; }

    @media (max-width: 768px) {
      h1 { font-size: 2em; }
      .section { padding: 20px; }
    }
"""


def format_updated(now: datetime) -> str:
    """Format a timestamp as e.g. ``October 19, 2026 at 3:04 PM UTC``."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    hour = now.hour % 12 or 12
    meridiem = "AM" if now.hour < 12 else "PM"
    return f"{now:%B} {now.day}, {now.year} at {hour}:{now.minute:02d} {meridiem} UTC"


def render_html(stats: GitHubStats, config: Config, now: datetime) -> str:
    """Render the index page; ``now`` drives the timestamp and footer year."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    name = escape_xml(config.display_name)
    generated_dir = escape_xml(cards_href(config.generated_dir, config.index_path))

    links = "\n        ".join(
        f"""<a href="{escape_xml(link.url)}" target="_blank">
          <img src="{escape_xml(link.icon_url)}" alt="{escape_xml(link.name)}" height="40" />
        </a>"""
        for link in social_links(config)
    )
    images = "\n          ".join(
        f'<img src="{generated_dir}/{filename}" alt="{escape_xml(alt)}" />'
        for filename, alt in CARDS
    )

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <meta name="description" content="GitHub profile and statistics for {name}">
  <link rel="icon" type="image/x-icon" href="https://avatars.githubusercontent.com/u/{stats.user_id}?v=4">
  <title>Hi, I'm {name}</title>
  <style>{STYLES}  </style>
</head>
<body>
  <div class="container">
    <header>
      <h1>Hi, I'm {name}</h1>
      <p class="subtitle">{escape_xml(config.profile_tagline)}</p>
    </header>

    <main>
      <section class="section">
        <h2>Connect with me</h2>
        <div class="connect">
        {links}
        </div>
      </section>

      <section class="section">
        <p class="updated">Last updated: {format_updated(now)}</p>
        <div class="stats-container">
          {images}
        </div>
      </section>
    </main>

    <footer>
      <p>&copy; {now.year} {name}. Auto-generated with GitHub Stats Factory.</p>
    </footer>
  </div>
</body>
</html>
"""
