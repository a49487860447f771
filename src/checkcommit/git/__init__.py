"""Retrieval of commit subjects: CI environment, local repository and hosting API."""

from .api import HostingAPIError, PullRequestTarget, detect_pull_request, fetch_commit_subjects
from .environment import GitEnvironment, GitEnvironmentError, detect_git_environment
from .utils import CommitRangeReader, GitError, strip_subject_quotes

__all__ = [
	"CommitRangeReader",
	"GitEnvironment",
	"GitEnvironmentError",
	"GitError",
	"HostingAPIError",
	"PullRequestTarget",
	"detect_git_environment",
	"detect_pull_request",
	"fetch_commit_subjects",
	"strip_subject_quotes",
]
