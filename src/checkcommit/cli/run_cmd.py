"""Command for checking the commits of a pull or merge request in CI."""

import logging
from pathlib import Path

import typer

from .cli_types import BaseOpt, ConfigOpt, RefOpt, RepoOpt, SourceOpt, SubjectSource

logger = logging.getLogger(__name__)


def register_command(app: typer.Typer) -> None:
	"""Register the run command with the CLI app."""

	@app.command(name="run")
	def run_command(
		config: ConfigOpt = None,
		repo: RepoOpt = None,
		base: BaseOpt = None,
		ref: RefOpt = None,
		source: SourceOpt = SubjectSource.AUTO,
	) -> None:
		"""
		Check the subject of every commit in the current pull or merge request.

		Refs default to the ones the CI platform exposes (GitHub or GitLab).
		All failing subjects are reported before the command exits non-zero.

		"""
		_run_command_impl(config=config, repo=repo, base=base, ref=ref, source=source)


def collect_subjects(repo: Path | None, base: str | None, ref: str | None, source: SubjectSource) -> list[str]:
	"""
	Collect the commit subjects to check.

	With `auto`, the hosting API is used when a pull/merge request and an
	API token are available and no refs were given; otherwise the local
	repository is walked.

	Args:
		repo: Path inside the repository
		base: Target ref, defaults to the CI target branch
		ref: Source ref, defaults to the CI source ref
		source: Where to read subjects from

	Returns:
		list[str]: Commit subjects

	Raises:
		GitError: If the local repository cannot be read
		GitEnvironmentError: If refs are missing and no CI environment is detected
		HostingAPIError: If the hosting API cannot be queried

	"""
	from checkcommit.git import (
		CommitRangeReader,
		HostingAPIError,
		detect_git_environment,
		detect_pull_request,
		fetch_commit_subjects,
	)

	use_api = source is SubjectSource.API or (source is SubjectSource.AUTO and base is None and ref is None)
	if use_api:
		target = detect_pull_request()
		if target is not None and (source is SubjectSource.API or target.token):
			logger.info("Reading commits from the %s API", target.platform)
			return fetch_commit_subjects(target)
		if source is SubjectSource.API:
			msg = "No pull or merge request detected in the CI environment"
			raise HostingAPIError(msg)

	if base is None or ref is None:
		environment = detect_git_environment()
		base = base or environment.base
		ref = ref or environment.ref

	logger.info("Reading commits from the local repository")
	return CommitRangeReader(repo).get_commit_subjects(base, ref)


def _run_command_impl(
	config: Path | None,
	repo: Path | None,
	base: str | None,
	ref: str | None,
	source: SubjectSource,
) -> None:
	"""Actual implementation of the run command."""
	from checkcommit.config import ConfigError, ConfigLoader
	from checkcommit.git import GitEnvironmentError, GitError, HostingAPIError, strip_subject_quotes
	from checkcommit.linter import SubjectChecker
	from checkcommit.utils.cli_utils import exit_with_error, print_report, show_warning

	try:
		policy = ConfigLoader(config).get
	except ConfigError as e:
		exit_with_error("Error reading configuration", exception=e)

	if policy.is_empty():
		show_warning("Using empty configuration (i.e. no verification)")

	try:
		subjects = collect_subjects(repo, base, ref, source)
	except GitEnvironmentError as e:
		exit_with_error(
			"Couldn't auto-detect running environment, please set GITHUB_REF and GITHUB_BASE_REF "
			"or pass --base and --ref",
			exception=e,
		)
	except (GitError, HostingAPIError) as e:
		exit_with_error("Unable to get commit subjects", exception=e)

	if not subjects:
		show_warning("No commits found to check")
		return

	report = SubjectChecker(policy).evaluate_all(strip_subject_quotes(subject) for subject in subjects)
	print_report(report, policy.help_text)
	if not report.ok:
		raise typer.Exit(1)
