from __future__ import annotations

import os
from typing import Iterable, List, Optional

from pydantic import BaseModel


DEFAULT_SPRING_VERSION = "2.5"

BEANS_NAMESPACE = "http://www.springframework.org/schema/beans"
XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
SCHEMA_BASE_URL = BEANS_NAMESPACE

# Never entered while walking package directories
IGNORED_DIRS = {".svn", ".git", ".hg", "CVS"}

JAVA_SUFFIX = ".java"


class ConfigError(Exception):
	"""Raised when the generator is asked to run with unusable settings.

	Every problem found is kept in ``messages`` so they can all be reported at once.
	"""

	def __init__(self, messages: List[str]):
		super().__init__("; ".join(messages))
		self.messages = messages


class GeneratorConfig(BaseModel):
	source_dir: str
	packages: List[str]
	spring_version: str = DEFAULT_SPRING_VERSION
	recurse: bool = False


def build_config(
	source_dir: Optional[str],
	packages: Optional[Iterable[Optional[str]]],
	spring_version: Optional[str] = None,
	recurse: bool = False,
) -> GeneratorConfig:
	errors: List[str] = []
	if not source_dir:
		errors.append('The source directory must be specified (example: "--source=path/to/src").')
	elif not os.path.isdir(source_dir):
		errors.append(f"The source directory does not exist: {source_dir}")

	# None stands for the default package, same as a blank name
	package_list = [p or "" for p in packages] if packages is not None else []
	if not package_list:
		errors.append(
			'At least one package must be specified (example: "--package=com.example").  '
			'Use a blank value for the default package (example: "--package=").'
		)

	if errors:
		raise ConfigError(errors)

	return GeneratorConfig(
		source_dir=os.path.abspath(source_dir),
		packages=package_list,
		spring_version=spring_version or DEFAULT_SPRING_VERSION,
		recurse=recurse,
	)
