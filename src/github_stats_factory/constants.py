"""Application-wide constants."""

# Date ranges
CONTRIBUTION_DAYS = 365  # contribution calendar and commit window
ACTIVITY_DAYS = 30  # trailing window for per-repository activity series
HEATMAP_DAYS = 84  # 12 weeks shown in the overview heatmap

# Defaults
DEFAULT_USERNAME = "octocat"
DEFAULT_TAGLINE = "A passionate software developer"

# Limits
MAX_REPOS_FOR_DETAILS = 50  # per-repository language/commit fetches
MAX_COMMIT_PAGES = 10
TOP_LANGUAGES = 8
OTHER_THRESHOLD = 0.5  # minimum combined percentage for the "Other" bucket
TOP_REPOS = 5
TOP_ACTIVE_REPOS = 5

# Output paths
GENERATED_DIR = "generated"
README_PATH = "README.md"
INDEX_PATH = "index.html"
SVG_STATS_OVERVIEW = "stats-overview.svg"
SVG_LANGUAGES = "languages.svg"
SVG_PRODUCTIVITY = "productivity.svg"

# Console messages
MSG_FETCHING_DATA = "Step 1: Fetching GitHub data..."
MSG_GENERATING_SVG = "Step 2: Generating SVG cards..."
MSG_GENERATING_README = "Step 3: Generating README..."
MSG_GENERATING_HTML = "Step 4: Generating HTML page..."
MSG_COMPLETED = "GitHub Stats Factory completed successfully!"
MSG_STATS_UPDATED = "Your stats are now up to date!"
MSG_CONFIG_EXAMPLE = "Example: GITHUB_TOKEN=ghp_xxxxxxxxxxxx"

# Error messages
ERROR_NO_TOKEN = (
    "GITHUB_TOKEN is not set in environment variables. "
    "Please create a .env file with your GitHub Personal Access Token."
)
ERROR_NO_USERNAME = "GITHUB_USERNAME must not be empty."
