"""Regex extraction of Spring bean descriptions from Java source text.

This is pattern matching, not parsing: comments, nested classes, arrays and
declarations such as ``public int a, b;`` or ``public static int X;`` are
not understood and simply produce no match.
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional

from .model import BeanDescriptor, ConstructorArg, PropertyEntry, TypeKind


PACKAGE_RE = re.compile(r"^\s*package\s+(.*?)\s*;", re.DOTALL)
CLASS_NAME_RE = re.compile(r"public\s+class\s+(\w+)")
PARAMETER_RE = re.compile(r"([a-zA-Z_0-9<>\.]+)\s+(\w+)")
SETTER_RE = re.compile(r"public\s+\w+\s+set(\w+)\s*\(\s*([a-zA-Z_0-9\.]+)\s+\w+\s*\)")
PUBLIC_FIELD_RE = re.compile(r"public\s+([a-zA-Z_0-9\.]+)\s+(\w+)(\s*=\s*(.*?))?;", re.DOTALL)
NUMERIC_SUFFIX_RE = re.compile(
	r"[-+]?(?:(?:\d[\d_]*\.?[\d_]*|\.\d[\d_]*)(?:[eE][-+]?\d+)?[dDfFlL]"
	r"|0[xX][0-9a-fA-F_]+[lL]"
	r"|0[bB][01_]+[lL])"
)

PRIMITIVES = frozenset(["byte", "short", "char", "int", "long", "float", "double", "boolean"])
WRAPPERS = frozenset(["Byte", "Short", "Character", "Integer", "Long", "Float", "Double", "Boolean", "String"])
COLLECTIONS: Dict[str, str] = {
	"List": "list",
	"java.util.List": "list",
	"Set": "set",
	"java.util.Set": "set",
	"Map": "map",
	"java.util.Map": "map",
	"Properties": "props",
	"java.util.Properties": "props",
}


def lower_first(name: str) -> str:
	return name[:1].lower() + name[1:]


def classify_type(type_name: str, collections: bool = True) -> TypeKind:
	if type_name in PRIMITIVES:
		return TypeKind.PRIMITIVE
	if type_name in WRAPPERS:
		return TypeKind.WRAPPER
	if collections and type_name in COLLECTIONS:
		return TypeKind.COLLECTION
	return TypeKind.REFERENCE


def normalize_literal(raw: Optional[str]) -> str:
	if raw is None:
		return ""
	value = raw.strip()
	if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
		return value[1:-1]
	if NUMERIC_SUFFIX_RE.fullmatch(value):
		return value[:-1]
	return value


def find_class_name(text: str) -> Optional[str]:
	m = CLASS_NAME_RE.search(text)
	return m.group(1) if m else None


def find_package(text: str) -> Optional[str]:
	m = PACKAGE_RE.search(text)
	return m.group(1) if m else None


def _constructor_re(class_name: str) -> re.Pattern:
	return re.compile(r"public\s+" + re.escape(class_name) + r"\s*\(\s*(.*?)\s*\)")


def extract_constructor_args(text: str, class_name: str) -> List[ConstructorArg]:
	parameter_lists: List[str] = []
	for m in _constructor_re(class_name).finditer(text):
		params = m.group(1)
		if not params:
			# A default constructor wins over any other constructor
			return []
		parameter_lists.append(params)
	if len(parameter_lists) != 1:
		return []

	args: List[ConstructorArg] = []
	for index, m in enumerate(PARAMETER_RE.finditer(parameter_lists[0])):
		type_name = m.group(1)
		kind = classify_type(type_name, collections=False)
		if kind == TypeKind.REFERENCE:
			args.append(ConstructorArg(index=index, kind=kind, declared_type=type_name, ref=lower_first(type_name)))
		else:
			args.append(ConstructorArg(index=index, kind=kind, declared_type=type_name, inline_value=""))
	return args


def _property(name: str, type_name: str, literal: str) -> PropertyEntry:
	kind = classify_type(type_name)
	if kind == TypeKind.COLLECTION:
		return PropertyEntry(name=name, kind=kind, declared_type=type_name, collection=COLLECTIONS[type_name])
	if kind == TypeKind.REFERENCE:
		return PropertyEntry(name=name, kind=kind, declared_type=type_name, ref=lower_first(type_name))
	return PropertyEntry(name=name, kind=kind, declared_type=type_name, literal_value=literal)


def extract_field_properties(text: str) -> List[PropertyEntry]:
	return [
		_property(m.group(2), m.group(1), normalize_literal(m.group(4)))
		for m in PUBLIC_FIELD_RE.finditer(text)
	]


def extract_setter_properties(text: str) -> List[PropertyEntry]:
	# Setters carry no default, so scalar values are always blank
	return [
		_property(lower_first(m.group(1)), m.group(2), "")
		for m in SETTER_RE.finditer(text)
	]


def extract_bean(text: str) -> Optional[BeanDescriptor]:
	"""Build the bean description of a Java source file.

	Returns None when the text declares no ``public class``. Properties from
	public fields come first, then those from setters, each in source order;
	a field and a setter of the same name both produce an entry.
	"""
	class_name = find_class_name(text)
	if class_name is None:
		return None

	package = find_package(text)
	return BeanDescriptor(
		id=lower_first(class_name),
		class_name=f"{package}.{class_name}" if package else class_name,
		constructor_args=extract_constructor_args(text, class_name),
		properties=extract_field_properties(text) + extract_setter_properties(text),
	)
