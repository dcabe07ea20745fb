from textwrap import dedent

from appcontext.java_extract import (
	classify_type,
	extract_bean,
	extract_constructor_args,
	find_package,
	lower_first,
	normalize_literal,
)
from appcontext.model import TypeKind


def test_no_public_class():
	assert extract_bean("class Hidden { public int a; }") is None
	assert extract_bean("") is None


def test_default_package():
	bean = extract_bean("public class Clazz{}")
	assert bean.id == "clazz"
	assert bean.class_name == "Clazz"
	assert bean.properties == []
	assert bean.constructor_args == []


def test_package():
	bean = extract_bean("package com.example; public class Clazz{}")
	assert bean.id == "clazz"
	assert bean.class_name == "com.example.Clazz"


def test_package_must_lead_the_file():
	assert find_package("  \n package com.example ;\npublic class A{}") == "com.example"
	assert find_package("import x; package com.example; public class A{}") is None


def test_public_fields():
	bean = extract_bean("public class Clazz{ private int hidden; public byte b; public byte bv = 5; public AnObject obj;}")
	props = bean.properties
	assert [p.name for p in props] == ["b", "bv", "obj"]
	assert props[0].literal_value == "" and props[0].ref is None
	assert props[1].literal_value == "5" and props[1].ref is None
	assert props[2].literal_value is None
	assert props[2].ref == "anObject"
	assert props[2].kind == TypeKind.REFERENCE


def test_field_initializers_are_normalized():
	code = dedent(
		"""
		public class Clazz {
			public String s = "hello world";
			public char c = 'x';
			public double d = 1.5d;
			public long l = 10L;
			public Float f = 2.0F;
			public boolean flag =
				true ;
		}
		"""
	)
	values = {p.name: p.literal_value for p in extract_bean(code).properties}
	assert values == {"s": "hello world", "c": "x", "d": "1.5", "l": "10", "f": "2.0", "flag": "true"}


def test_normalize_literal():
	assert normalize_literal(None) == ""
	assert normalize_literal("  42 ") == "42"
	assert normalize_literal('"2.5f"') == "2.5f"
	assert normalize_literal("0xFF") == "0xFF"
	assert normalize_literal("0xFFL") == "0xFF"
	assert normalize_literal("0b101L") == "0b101"
	assert normalize_literal("null") == "null"
	assert normalize_literal("SOME_CONSTANT") == "SOME_CONSTANT"
	assert normalize_literal(".5f") == ".5"


def test_setters():
	code = (
		"public class Clazz{ private int hidden; private void setHidden(String hidden){} "
		"public void setTooManyParams(String too, String many){} public void setFoo(int f){} "
		"public void setBar(AnObject b){}}"
	)
	props = extract_bean(code).properties
	assert [p.name for p in props] == ["foo", "bar"]
	assert props[0].literal_value == "" and props[0].ref is None
	assert props[1].literal_value is None and props[1].ref == "anObject"


def test_fields_come_before_setters_without_dedup():
	code = "public class Clazz{ public void setName(String n){} public String name = \"x\"; }"
	props = extract_bean(code).properties
	assert [(p.name, p.literal_value) for p in props] == [("name", "x"), ("name", "")]


def test_collection_properties():
	code = (
		"public class Clazz{ public List list1; public java.util.Set set1; public Map map1; "
		"public java.util.Properties prop1; public void setList2(java.util.List l){} "
		"public void setSet2(Set s){} public void setMap2(java.util.Map m){} public void setProp2(Properties p){} }"
	)
	props = extract_bean(code).properties
	assert [(p.name, p.collection) for p in props] == [
		("list1", "list"),
		("set1", "set"),
		("map1", "map"),
		("prop1", "props"),
		("list2", "list"),
		("set2", "set"),
		("map2", "map"),
		("prop2", "props"),
	]
	assert all(p.ref is None and p.literal_value is None for p in props)


def test_single_constructor():
	bean = extract_bean("public class Clazz{ public Clazz(int arg, String arg2, AnObject obj){} }")
	args = bean.constructor_args
	assert [a.index for a in args] == [0, 1, 2]
	assert args[0].xml_type == "int" and args[0].inline_value == ""
	assert args[1].xml_type == "java.lang.String" and args[1].inline_value == ""
	assert args[2].xml_type is None and args[2].ref == "anObject"


def test_no_constructor():
	assert extract_bean("public class Clazz{}").constructor_args == []


def test_default_constructor_wins():
	assert extract_bean("public class Clazz{ public Clazz(){} }").constructor_args == []
	assert extract_bean("public class Clazz2{ public Clazz2(){} public Clazz2(int arg){} }").constructor_args == []
	assert extract_bean("public class Clazz2{ public Clazz2(int arg){} public Clazz2( ){} }").constructor_args == []


def test_two_constructors_are_ambiguous():
	assert extract_bean("public class Clazz2{ public Clazz2(String arg){} public Clazz2(int arg){} }").constructor_args == []


def test_constructor_collections_are_references():
	args = extract_constructor_args("public Clazz(List items){}", "Clazz")
	assert args[0].kind == TypeKind.REFERENCE
	assert args[0].ref == "list"


def test_classify_type():
	assert classify_type("int") == TypeKind.PRIMITIVE
	assert classify_type("Integer") == TypeKind.WRAPPER
	assert classify_type("java.util.Map") == TypeKind.COLLECTION
	assert classify_type("java.util.Map", collections=False) == TypeKind.REFERENCE
	assert classify_type("java.lang.String") == TypeKind.REFERENCE


def test_lower_first():
	assert lower_first("AnObject") == "anObject"
	assert lower_first("") == ""


def test_hex_and_binary_long_initializers():
	bean = extract_bean("public class C{ public long mask = 0xFFL; public long bits = 0b101L; public int hex = 0xAF; }")
	assert [p.literal_value for p in bean.properties] == ["0xFF", "0b101", "0xAF"]
