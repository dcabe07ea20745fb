from __future__ import annotations

import logging
import os
from collections import deque
from typing import Deque, Iterable, Iterator

from .config import IGNORED_DIRS, JAVA_SUFFIX
from .model import SourceUnit


logger = logging.getLogger(__name__)


def package_dir(source_dir: str, package: str) -> str:
	if not package:
		return source_dir
	return os.path.join(source_dir, *package.split("."))


def is_java_file(filename: str) -> bool:
	return filename.endswith(JAVA_SUFFIX)


def iter_java_files(source_dir: str, packages: Iterable[str], recurse: bool = False) -> Iterator[str]:
	"""Yield the paths of the ``.java`` files of each package directory.

	Directories are visited breadth-first, in the order the packages were given.
	Sub-packages are only queued when ``recurse`` is set.
	"""
	queue: Deque[str] = deque(package_dir(source_dir, p) for p in packages)
	while queue:
		directory = queue.popleft()
		logger.debug("Scanning %s", directory)
		for name in sorted(os.listdir(directory)):
			path = os.path.join(directory, name)
			if os.path.isdir(path):
				if recurse and name not in IGNORED_DIRS:
					queue.append(path)
			elif is_java_file(name) and os.path.isfile(path):
				yield path


def read_source(path: str) -> SourceUnit:
	# Undecodable bytes are replaced so one legacy-encoded file does not abort the run
	with open(path, "r", encoding="utf-8", errors="replace") as fh:
		return SourceUnit(path=path, text=fh.read())


def iter_sources(source_dir: str, packages: Iterable[str], recurse: bool = False) -> Iterator[SourceUnit]:
	for path in iter_java_files(source_dir, packages, recurse):
		yield read_source(path)
