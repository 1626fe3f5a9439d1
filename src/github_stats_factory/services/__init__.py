"""Services for GitHub data collection and aggregation."""

from github_stats_factory.services.commit_service import CommitService
from github_stats_factory.services.contribution_service import ContributionService
from github_stats_factory.services.github_graphql_client import GitHubGraphQLClient
from github_stats_factory.services.github_rest_client import GitHubRestClient
from github_stats_factory.services.language_service import LanguageService
from github_stats_factory.services.repository_service import RepositoryService

__all__ = [
    "GitHubRestClient",
    "GitHubGraphQLClient",
    "ContributionService",
    "LanguageService",
    "RepositoryService",
    "CommitService",
]
