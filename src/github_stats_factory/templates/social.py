"""Social links shared by the README and the HTML page."""

from github_stats_factory.config import Config
from github_stats_factory.models.profile import SocialLink

GITHUB_ICON = (
    "https://raw.githubusercontent.com/rahuldkjain/github-profile-readme-generator"
    "/master/src/images/icons/Social/github.svg"
)


def social_links(config: Config) -> list[SocialLink]:
    """Configured links plus the GitHub profile, which is always listed last.

    A configured link named "GitHub" replaces the default one.
    """
    links = [link for link in config.social_links if link.name.lower() != "github"]
    github = next(
        (link for link in config.social_links if link.name.lower() == "github"),
        SocialLink(
            name="GitHub",
            url=f"https://github.com/{config.github_username}",
            icon=GITHUB_ICON,
        ),
    )
    return [*links, github]
