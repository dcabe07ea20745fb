"""Generates Spring XML bean definitions from Java source code.

Modules:
- fs_scan.py: Walks package directories and reads Java sources.
- java_extract.py: Regex extraction of bean descriptions from source text.
- model.py: Data structures for sources, beans, properties and constructor args.
- emit.py: Renders the bean descriptions as a Spring beans XML document.
- pipeline.py: Ties walking, extraction and rendering together.
- config.py: Settings, defaults and configuration errors.
"""

__all__ = [
	"config",
	"emit",
	"fs_scan",
	"java_extract",
	"model",
	"pipeline",
]
