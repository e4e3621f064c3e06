"""Document assembler: turns service metadata and tag groups into the API document."""

import random
from typing import Any

from pydantic import BaseModel, ConfigDict
from werkzeug.wrappers import Response

from api_doc_builder.errors import Collision, DocumentConflictError
from api_doc_builder.generator.definitions import build_definitions, find_dangling_refs
from api_doc_builder.generator.output import to_json_bytes, to_response, to_yaml
from api_doc_builder.generator.paths import build_paths
from api_doc_builder.log import get_logger
from api_doc_builder.model.base import Scheme, ServiceMetadata, TagGroup

OPENAPI_VERSION = "3.0.0"

logger = get_logger(__name__)


class AssemblyResult(BaseModel):
    """The document plus everything that was silently overwritten while building it."""

    model_config = ConfigDict(frozen=True)

    document: dict[str, Any]
    collisions: list[Collision] = []
    dangling_refs: list[str] = []

    @property
    def clean(self) -> bool:
        return not self.collisions and not self.dangling_refs


def scheme_names(schemes: frozenset[Scheme]) -> list[str]:
    """Schemes in fixed http, https order, limited to those present."""
    return [s.value for s in Scheme if s in schemes]


class DocumentAssembler:
    """Builds the API document in one pure pass over the declared model.

    The assembler keeps no state between calls. Boolean examples are drawn
    from ``rng`` when one is injected, otherwise from a fresh
    ``random.Random(seed)`` created for each call.
    """

    def __init__(self, rng: random.Random | None = None, seed: int | None = None, strict: bool = False):
        self.rng = rng
        self.seed = seed
        self.strict = strict

    def assemble(self, metadata: ServiceMetadata, tags: list[TagGroup]) -> AssemblyResult:
        rng = self.rng if self.rng is not None else random.Random(self.seed)
        collisions: list[Collision] = []

        document: dict[str, Any] = {
            "openapi": OPENAPI_VERSION,
            "info": {
                "title": metadata.title,
                "description": metadata.description,
                "version": metadata.version,
                "contact": {"email": metadata.contact_email},
            },
            "host": metadata.host,
            "basePath": metadata.base_path,
            "schemes": scheme_names(metadata.schemes),
            "tags": [{"name": t.name, "description": t.description} for t in tags],
            "paths": build_paths(tags, collisions),
            "definitions": build_definitions(tags, rng, collisions),
        }
        dangling = find_dangling_refs(document)

        for collision in collisions:
            logger.warning("declaration_overwritten", kind=collision.kind, key=collision.key, detail=collision.detail)
        if dangling:
            logger.info("undefined_references", names=dangling)
        logger.debug(
            "document_assembled",
            title=metadata.title,
            paths=len(document["paths"]),
            definitions=len(document["definitions"]),
        )

        if self.strict and collisions:
            raise DocumentConflictError(collisions)

        return AssemblyResult(document=document, collisions=collisions, dangling_refs=dangling)

    def build(self, metadata: ServiceMetadata, tags: list[TagGroup]) -> dict[str, Any]:
        """Return only the document."""
        return self.assemble(metadata, tags).document

    def generate_json(self, metadata: ServiceMetadata, tags: list[TagGroup], indent: int | None = 2) -> bytes:
        return to_json_bytes(self.build(metadata, tags), indent)

    def generate_yaml(self, metadata: ServiceMetadata, tags: list[TagGroup]) -> str:
        return to_yaml(self.build(metadata, tags))

    def generate_response(self, metadata: ServiceMetadata, tags: list[TagGroup]) -> Response:
        return to_response(self.build(metadata, tags))
