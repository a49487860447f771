"""Type definitions for CLI parameters."""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer


class SubjectSource(str, Enum):
	"""Where the `run` command reads commit subjects from."""

	AUTO = "auto"
	GIT = "git"
	API = "api"


ConfigOpt = Annotated[
	Path | None,
	typer.Option(
		"--config",
		"-c",
		help="Path to the commit policy file (defaults to .check-commit.yml)",
	),
]

RepoOpt = Annotated[
	Path | None,
	typer.Option(
		"--repo",
		"-r",
		help="Path inside the repository to read commits from",
		exists=True,
		file_okay=False,
	),
]

BaseOpt = Annotated[
	str | None,
	typer.Option("--base", help="Target branch or ref (defaults to the CI target branch)"),
]

RefOpt = Annotated[
	str | None,
	typer.Option("--ref", help="Source branch or ref (defaults to the CI source ref)"),
]

SourceOpt = Annotated[
	SubjectSource,
	typer.Option(
		"--source",
		"-s",
		help="Read subjects from the local repository (git), the hosting API (api) or pick automatically",
		case_sensitive=False,
	),
]
