from __future__ import annotations

import logging
from functools import reduce
from typing import Iterable, List, Tuple

from .config import GeneratorConfig
from .emit import render_document
from .fs_scan import iter_sources
from .java_extract import extract_bean
from .model import BeanDescriptor, BeansDocument, SourceUnit


logger = logging.getLogger(__name__)


def add_bean(beans: Tuple[BeanDescriptor, ...], source: SourceUnit) -> Tuple[BeanDescriptor, ...]:
	bean = extract_bean(source.text)
	if bean is None:
		logger.debug("No public class found in %s", source.path or "<text>")
		return beans
	return beans + (bean,)


def collect_beans(sources: Iterable[SourceUnit]) -> List[BeanDescriptor]:
	return list(reduce(add_bean, sources, ()))


def build_document(config: GeneratorConfig) -> BeansDocument:
	sources = iter_sources(config.source_dir, config.packages, recurse=config.recurse)
	beans = collect_beans(sources)
	logger.info("Generated %d bean definitions", len(beans))
	return BeansDocument(spring_version=config.spring_version, beans=beans)


def generate(config: GeneratorConfig) -> str:
	return render_document(build_document(config))
