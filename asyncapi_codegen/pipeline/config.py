"""
Configuration for the code generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Traits derived on every generated struct and enum
    derives: list[str] = field(default_factory=lambda: ["Clone", "Debug", "Default", "Deserialize", "Serialize"])

    # Add generation banner at top of file
    add_generation_comment: bool = True

    # Document name shown in the generation banner
    source_name: str = "asyncapi.yaml"

    # Run the structural check on rendered output before writing
    validate_before_write: bool = True

    # Write through a temporary file and atomic replace
    atomic_write: bool = True

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "derives": list(self.derives),
            "add_generation_comment": self.add_generation_comment,
            "source_name": self.source_name,
            "validate_before_write": self.validate_before_write,
            "atomic_write": self.atomic_write,
        }
