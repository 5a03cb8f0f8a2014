"""
Pipeline generator: load -> analyze -> render -> write.

The output file is written once, only after the whole model has been
built and rendered in memory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .analyzer import IR, SchemaAnalyzer
from .backends import RustBackend
from .config import CodeGeneratorConfig
from .loader import load_document, load_document_from_dict
from .schema_ast.nodes import SchemaDocument
from .writer import AtomicWriter, write_plain

logger = logging.getLogger(__name__)


class PipelineGenerator:
    """Generates type declarations for one document."""

    def __init__(self, document: SchemaDocument | dict[str, Any], config: CodeGeneratorConfig | None = None):
        """
        Args:
            document: A loaded SchemaDocument, or the raw parsed document mapping
            config: Code generation configuration
        """
        self.config = config or CodeGeneratorConfig()
        if not isinstance(document, SchemaDocument):
            document = load_document_from_dict(document, source_name=self.config.source_name)
        self.document = document

    @classmethod
    def from_file(cls, path: str | Path, config: CodeGeneratorConfig | None = None) -> PipelineGenerator:
        return cls(load_document(path), config)

    def analyze(self) -> IR:
        return SchemaAnalyzer().analyze(self.document)

    def generate(self) -> str:
        """Run the pipeline and return the generated source."""
        ir = self.analyze()
        return RustBackend(self.config).generate(ir)

    def write(self, output: str | Path) -> str:
        """Generate and write the output file, replacing any previous content."""
        content = self.generate()
        output = Path(output)

        if self.config.atomic_write:
            AtomicWriter().write(output, content, "rust", validate=self.config.validate_before_write)
        else:
            write_plain(output, content)

        logger.debug("Wrote %s (%d bytes)", output, len(content))
        return content
