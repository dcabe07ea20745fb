from __future__ import annotations

import xml.etree.ElementTree as ET

from .config import BEANS_NAMESPACE, XSI_NAMESPACE
from .model import BeanDescriptor, BeansDocument, ConstructorArg, PropertyEntry


XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'


def _constructor_arg_element(parent: ET.Element, arg: ConstructorArg) -> ET.Element:
	el = ET.SubElement(parent, "constructor-arg", {"index": str(arg.index)})
	if arg.ref is not None:
		el.set("ref", arg.ref)
	else:
		el.set("type", arg.xml_type or arg.declared_type)
		el.set("value", arg.inline_value or "")
	return el


def _property_element(parent: ET.Element, prop: PropertyEntry) -> ET.Element:
	el = ET.SubElement(parent, "property", {"name": prop.name})
	if prop.collection is not None:
		ET.SubElement(el, prop.collection)
	elif prop.ref is not None:
		el.set("ref", prop.ref)
	else:
		el.set("value", prop.literal_value or "")
	return el


def bean_element(parent: ET.Element, bean: BeanDescriptor) -> ET.Element:
	el = ET.SubElement(parent, "bean", {"id": bean.id, "class": bean.class_name})
	for arg in bean.constructor_args:
		_constructor_arg_element(el, arg)
	for prop in bean.properties:
		_property_element(el, prop)
	return el


def build_tree(doc: BeansDocument) -> ET.Element:
	# Namespace declarations are written as plain attributes so children stay
	# unprefixed and land in the default beans namespace.
	root = ET.Element(
		"beans",
		{
			"xmlns": BEANS_NAMESPACE,
			"xmlns:xsi": XSI_NAMESPACE,
			"xsi:schemaLocation": doc.schema_location,
		},
	)
	for bean in doc.beans:
		bean_element(root, bean)
	return root


def render_document(doc: BeansDocument) -> str:
	root = build_tree(doc)
	ET.indent(root)
	return XML_DECLARATION + "\n" + ET.tostring(root, encoding="unicode") + "\n"
