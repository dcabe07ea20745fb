from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict

from .config import SCHEMA_BASE_URL


class TypeKind(str, Enum):
	PRIMITIVE = "primitive"
	WRAPPER = "wrapper"
	COLLECTION = "collection"
	REFERENCE = "reference"


class SourceUnit(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: Optional[str] = None
	text: str


class ConstructorArg(BaseModel):
	index: int
	kind: TypeKind
	declared_type: str
	inline_value: Optional[str] = None
	ref: Optional[str] = None

	@property
	def xml_type(self) -> Optional[str]:
		if self.kind == TypeKind.WRAPPER:
			return "java.lang." + self.declared_type
		if self.kind == TypeKind.PRIMITIVE:
			return self.declared_type
		return None


class PropertyEntry(BaseModel):
	name: str
	kind: TypeKind
	declared_type: str
	literal_value: Optional[str] = None
	ref: Optional[str] = None
	collection: Optional[str] = None


class BeanDescriptor(BaseModel):
	id: str
	class_name: str
	constructor_args: List[ConstructorArg] = []
	properties: List[PropertyEntry] = []


class BeansDocument(BaseModel):
	spring_version: str
	beans: List[BeanDescriptor] = []

	@property
	def schema_location(self) -> str:
		return f"{SCHEMA_BASE_URL} {SCHEMA_BASE_URL}/spring-beans-{self.spring_version}.xsd"
