"""Read commit subjects from a local repository using pygit2."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from pygit2 import Commit, discover_repository
from pygit2 import GitError as Pygit2GitError
from pygit2.enums import SortMode
from pygit2.repository import Repository

if TYPE_CHECKING:
	from pygit2 import Oid

logger = logging.getLogger(__name__)


class GitError(Exception):
	"""Custom exception for Git-related errors."""


def strip_subject_quotes(subject: str) -> str:
	"""Remove single quotes wrapped around a subject by `git log --pretty=format:'%s'`."""
	return subject.strip("'")


class CommitRangeReader:
	"""Lists the subjects of the commits between two refs."""

	def __init__(self, repo_path: Path | None = None) -> None:
		"""
		Open the repository containing repo_path.

		Args:
			repo_path: Any path inside the repository, defaults to the current directory

		Raises:
			GitError: If the path is not inside a Git repository

		"""
		start = repo_path or Path.cwd()
		git_dir = discover_repository(str(start))
		if git_dir is None:
			msg = f"Not a git repository: {start}"
			logger.error(msg)
			raise GitError(msg)
		self.repo = Repository(git_dir)

	def resolve(self, ref: str) -> Oid:
		"""
		Resolve a branch name, ref or SHA to a commit id.

		Plain branch names that only exist on the remote are looked up as
		`origin/<name>`, which is how CI checkouts usually expose the target branch.

		Args:
			ref: Ref to resolve

		Returns:
			Oid: Id of the commit the ref points to

		Raises:
			GitError: If the ref cannot be resolved to a commit

		"""
		for candidate in (ref, f"origin/{ref}"):
			try:
				obj = self.repo.revparse_single(candidate)
			except (KeyError, ValueError, Pygit2GitError):
				continue
			try:
				return obj.peel(Commit).id
			except (ValueError, Pygit2GitError) as e:
				msg = f"'{candidate}' does not point to a commit"
				raise GitError(msg) from e

		msg = f"Could not resolve '{ref}'"
		logger.error(msg)
		raise GitError(msg)

	def get_commit_subjects(self, base: str, ref: str) -> list[str]:
		"""
		Get the subjects of the commits in `base...ref`.

		This is the symmetric difference of the two refs: commits reachable
		from either one but not from their merge base.

		Args:
			base: Target branch or ref
			ref: Source branch or ref

		Returns:
			List of commit subjects (first message line), newest first

		Raises:
			GitError: If a ref cannot be resolved or the walk fails

		"""
		base_oid = self.resolve(base)
		ref_oid = self.resolve(ref)

		try:
			walker = self.repo.walk(ref_oid, SortMode.TOPOLOGICAL)
			walker.push(base_oid)
			merge_base = self.repo.merge_base(base_oid, ref_oid)
			if merge_base is not None:
				walker.hide(merge_base)

			subjects = []
			for commit in walker:
				subject = commit.message.splitlines()[0] if commit.message else ""
				subjects.append(subject)
		except Pygit2GitError as e:
			msg = f"Failed to list commits in '{base}...{ref}': {e}"
			logger.exception(msg)
			raise GitError(msg) from e

		logger.info("Found %d commits in '%s...%s'", len(subjects), base, ref)
		return subjects
