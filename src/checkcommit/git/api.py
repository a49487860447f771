"""List the commits of a pull or merge request through the hosting platform API."""

from __future__ import annotations

import json
import logging
import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

import requests

if TYPE_CHECKING:
	from collections.abc import Mapping

logger = logging.getLogger(__name__)

GITHUB_API_URL = "https://api.github.com"
REQUEST_TIMEOUT = 10  # seconds
PAGE_SIZE = 100
PULL_REF_RE = re.compile(r"^refs/pull/(?P<number>\d+)/")


class HostingAPIError(Exception):
	"""Raised when the hosting platform API cannot be queried."""


@dataclass(frozen=True)
class PullRequestTarget:
	"""Commits endpoint of one pull or merge request."""

	platform: str
	url: str
	token: str = ""

	def headers(self) -> dict[str, str]:
		"""Request headers for the platform, including authentication when a token is set."""
		if self.platform == "GitLab":
			return {"PRIVATE-TOKEN": self.token} if self.token else {}

		headers = {"Accept": "application/vnd.github+json"}
		if self.token:
			headers["Authorization"] = f"Bearer {self.token}"
		return headers


def _github_pull_number(env: Mapping[str, str]) -> str | None:
	event_path = env.get("GITHUB_EVENT_PATH")
	if event_path and Path(event_path).exists():
		try:
			event = json.loads(Path(event_path).read_text(encoding="utf-8"))
		except (OSError, json.JSONDecodeError) as e:
			logger.warning("Could not read GitHub event payload %s: %s", event_path, e)
		else:
			pull_request = (event.get("pull_request") or {}) if isinstance(event, dict) else {}
			number = pull_request.get("number") if isinstance(pull_request, dict) else None
			if number is not None:
				return str(number)

	match = PULL_REF_RE.match(env.get("GITHUB_REF", ""))
	return match.group("number") if match else None


def detect_pull_request(environ: Mapping[str, str] | None = None) -> PullRequestTarget | None:
	"""
	Work out which pull or merge request is being checked from CI variables.

	Args:
		environ: Environment to inspect, defaults to os.environ

	Returns:
		The request's commits endpoint, or None when not running for a pull/merge request

	"""
	env = os.environ if environ is None else environ
	token = env.get("API_TOKEN", "")

	repository = env.get("GITHUB_REPOSITORY")
	if repository:
		number = _github_pull_number(env)
		if number is not None:
			api_url = env.get("GITHUB_API_URL", GITHUB_API_URL).rstrip("/")
			url = f"{api_url}/repos/{repository}/pulls/{number}/commits"
			logger.debug("Detected GitHub pull request %s of %s", number, repository)
			return PullRequestTarget(platform="GitHub", url=url, token=token)

	api_url = env.get("CI_API_V4_URL")
	project_id = env.get("CI_PROJECT_ID")
	mr_iid = env.get("CI_MERGE_REQUEST_IID")
	if api_url and project_id and mr_iid:
		url = f"{api_url.rstrip('/')}/projects/{project_id}/merge_requests/{mr_iid}/commits"
		logger.debug("Detected GitLab merge request %s of project %s", mr_iid, project_id)
		return PullRequestTarget(platform="GitLab", url=url, token=token)

	return None


def _subject_of(platform: str, item: dict[str, Any]) -> str:
	if platform == "GitLab":
		message = item.get("title") or item.get("message") or ""
	else:
		message = item.get("commit", {}).get("message") or ""
	return message.splitlines()[0] if message else ""


def fetch_commit_subjects(target: PullRequestTarget, timeout: float = REQUEST_TIMEOUT) -> list[str]:
	"""
	Fetch the subjects of every commit in a pull or merge request.

	Follows the `Link: rel="next"` pagination both platforms use.

	Args:
		target: The request to query
		timeout: Timeout for each HTTP request in seconds

	Returns:
		List of commit subjects in the order the platform returns them

	Raises:
		HostingAPIError: If a request fails or returns an unexpected payload

	"""
	subjects: list[str] = []
	url: str | None = target.url
	params: dict[str, int] | None = {"per_page": PAGE_SIZE}

	while url:
		try:
			response = requests.get(url, headers=target.headers(), params=params, timeout=timeout)
			response.raise_for_status()
			items = response.json()
		except (requests.RequestException, ValueError) as e:
			msg = f"Failed to list {target.platform} commits from {url}: {e}"
			logger.exception(msg)
			raise HostingAPIError(msg) from e

		if not isinstance(items, list):
			msg = f"Unexpected response from {url}: expected a list of commits"
			raise HostingAPIError(msg)

		subjects.extend(_subject_of(target.platform, item) for item in items)
		url = response.links.get("next", {}).get("url")
		params = None  # the next link already carries the query string

	logger.info("Fetched %d commits from %s", len(subjects), target.platform)
	return subjects
