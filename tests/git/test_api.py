"""Tests for the hosting platform API client."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest
import requests

from checkcommit.git import HostingAPIError, PullRequestTarget, detect_pull_request, fetch_commit_subjects

if TYPE_CHECKING:
	from pathlib import Path


def _response(items: object, next_url: str | None = None) -> Mock:
	response = Mock()
	response.json.return_value = items
	response.links = {"next": {"url": next_url}} if next_url else {}
	response.raise_for_status.return_value = None
	return response


@pytest.mark.unit
@pytest.mark.git
class TestDetectPullRequest:
	"""Test cases for detect_pull_request."""

	def test_github_from_ref(self) -> None:
		"""The pull request number is taken from the merge ref."""
		env = {"GITHUB_REPOSITORY": "haproxy/haproxy", "GITHUB_REF": "refs/pull/42/merge", "API_TOKEN": "secret"}
		target = detect_pull_request(env)
		assert target == PullRequestTarget(
			platform="GitHub",
			url="https://api.github.com/repos/haproxy/haproxy/pulls/42/commits",
			token="secret",
		)

	def test_github_from_event_payload(self, tmp_path: Path) -> None:
		"""The event payload is preferred over the ref."""
		event = tmp_path / "event.json"
		event.write_text(json.dumps({"pull_request": {"number": 7}}))
		env = {
			"GITHUB_REPOSITORY": "org/repo",
			"GITHUB_EVENT_PATH": str(event),
			"GITHUB_REF": "refs/heads/master",
			"GITHUB_API_URL": "https://ghe.example.com/api/v3/",
		}
		target = detect_pull_request(env)
		assert target is not None
		assert target.url == "https://ghe.example.com/api/v3/repos/org/repo/pulls/7/commits"
		assert target.token == ""

	@pytest.mark.parametrize("payload", [{"pull_request": None}, ["not", "an", "object"], {"pull_request": "x"}])
	def test_github_event_without_pull_request(self, tmp_path: Path, payload: object) -> None:
		"""Event payloads without a usable pull request fall back to the ref."""
		event = tmp_path / "event.json"
		event.write_text(json.dumps(payload))
		env = {"GITHUB_REPOSITORY": "org/repo", "GITHUB_EVENT_PATH": str(event), "GITHUB_REF": "refs/pull/9/merge"}
		target = detect_pull_request(env)
		assert target is not None
		assert target.url == "https://api.github.com/repos/org/repo/pulls/9/commits"

	def test_github_push_build(self) -> None:
		"""A push build has no pull request."""
		assert detect_pull_request({"GITHUB_REPOSITORY": "org/repo", "GITHUB_REF": "refs/heads/master"}) is None

	def test_gitlab(self) -> None:
		"""GitLab merge request pipelines are recognised."""
		env = {
			"CI_API_V4_URL": "https://gitlab.example.com/api/v4",
			"CI_PROJECT_ID": "99",
			"CI_MERGE_REQUEST_IID": "5",
			"API_TOKEN": "glpat",
		}
		target = detect_pull_request(env)
		assert target == PullRequestTarget(
			platform="GitLab",
			url="https://gitlab.example.com/api/v4/projects/99/merge_requests/5/commits",
			token="glpat",
		)

	def test_nothing_detected(self) -> None:
		"""Outside CI there is nothing to query."""
		assert detect_pull_request({}) is None


@pytest.mark.unit
@pytest.mark.git
class TestPullRequestTarget:
	"""Test cases for request headers."""

	def test_github_headers(self) -> None:
		"""GitHub uses a bearer token."""
		headers = PullRequestTarget("GitHub", "https://x", token="abc").headers()
		assert headers["Authorization"] == "Bearer abc"
		assert headers["Accept"] == "application/vnd.github+json"

	def test_github_anonymous(self) -> None:
		"""No token means no Authorization header."""
		assert "Authorization" not in PullRequestTarget("GitHub", "https://x").headers()

	def test_gitlab_headers(self) -> None:
		"""GitLab uses a private token header."""
		assert PullRequestTarget("GitLab", "https://x", token="abc").headers() == {"PRIVATE-TOKEN": "abc"}


@pytest.mark.unit
@pytest.mark.git
class TestFetchCommitSubjects:
	"""Test cases for fetch_commit_subjects."""

	def test_github_pagination(self) -> None:
		"""Pages are followed and only first message lines are kept."""
		target = PullRequestTarget("GitHub", "https://api.github.com/repos/o/r/pulls/1/commits", token="t")
		pages = [
			_response(
				[{"commit": {"message": "BUG/MINOR: first fix\n\nbody"}}],
				next_url="https://api.github.com/repos/o/r/pulls/1/commits?page=2",
			),
			_response([{"commit": {"message": "DOC: second change here"}}]),
		]
		with patch("checkcommit.git.api.requests.get", side_effect=pages) as mock_get:
			subjects = fetch_commit_subjects(target)

		assert subjects == ["BUG/MINOR: first fix", "DOC: second change here"]
		assert mock_get.call_count == 2
		first_call, second_call = mock_get.call_args_list
		assert first_call.args == (target.url,)
		assert first_call.kwargs["params"] == {"per_page": 100}
		assert first_call.kwargs["headers"]["Authorization"] == "Bearer t"
		assert second_call.args == ("https://api.github.com/repos/o/r/pulls/1/commits?page=2",)
		assert second_call.kwargs["params"] is None

	def test_gitlab_titles(self) -> None:
		"""GitLab commits are read from their title."""
		target = PullRequestTarget("GitLab", "https://gitlab.example.com/api/v4/projects/1/merge_requests/2/commits")
		items = [{"title": "MINOR: add a feature flag", "message": "MINOR: add a feature flag\n\nbody"}]
		with patch("checkcommit.git.api.requests.get", return_value=_response(items)):
			assert fetch_commit_subjects(target) == ["MINOR: add a feature flag"]

	def test_request_failure(self) -> None:
		"""Transport errors become HostingAPIError."""
		target = PullRequestTarget("GitHub", "https://api.github.com/repos/o/r/pulls/1/commits")
		with (
			patch("checkcommit.git.api.requests.get", side_effect=requests.ConnectionError("boom")),
			pytest.raises(HostingAPIError, match="Failed to list GitHub commits"),
		):
			fetch_commit_subjects(target)

	def test_http_error(self) -> None:
		"""Error status codes become HostingAPIError."""
		target = PullRequestTarget("GitHub", "https://api.github.com/repos/o/r/pulls/1/commits")
		response = _response([])
		response.raise_for_status.side_effect = requests.HTTPError("404 Client Error")
		with (
			patch("checkcommit.git.api.requests.get", return_value=response),
			pytest.raises(HostingAPIError, match="404"),
		):
			fetch_commit_subjects(target)

	def test_unexpected_payload(self) -> None:
		"""A payload that is not a list is rejected."""
		target = PullRequestTarget("GitHub", "https://api.github.com/repos/o/r/pulls/1/commits")
		with (
			patch("checkcommit.git.api.requests.get", return_value=_response({"message": "Not Found"})),
			pytest.raises(HostingAPIError, match="expected a list of commits"),
		):
			fetch_commit_subjects(target)
