from __future__ import annotations

from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel

from appcontext.config import DEFAULT_SPRING_VERSION, ConfigError, GeneratorConfig, build_config
from appcontext.emit import render_document
from appcontext.java_extract import extract_bean
from appcontext.model import BeanDescriptor, BeansDocument
from appcontext.pipeline import build_document


app = FastAPI(title="Spring Application Context Generator")


class ExtractRequest(BaseModel):
	code: str


class GenerateRequest(BaseModel):
	source_dir: Optional[str] = None
	packages: List[str] = []
	spring_version: str = DEFAULT_SPRING_VERSION
	recurse: bool = False


def _config(req: GenerateRequest) -> GeneratorConfig:
	try:
		return build_config(req.source_dir, req.packages, req.spring_version, req.recurse)
	except ConfigError as e:
		raise HTTPException(status_code=400, detail=e.messages)


@app.post("/extract", response_model=Optional[BeanDescriptor])
def extract(req: ExtractRequest) -> Optional[BeanDescriptor]:
	return extract_bean(req.code)


@app.post("/beans", response_model=BeansDocument)
def beans(req: GenerateRequest) -> BeansDocument:
	return build_document(_config(req))


@app.post("/generate")
def generate(req: GenerateRequest) -> Response:
	xml = render_document(build_document(_config(req)))
	return Response(content=xml, media_type="application/xml")


def create_app() -> FastAPI:
	return app
