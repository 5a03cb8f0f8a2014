import logging

import click

from .pipeline import CodeGeneratorConfig, GeneratorError, PipelineGenerator

# Fixed locations, relative to the asyncapi/ directory the tool runs from
DOCUMENT_PATH = "asyncapi.yaml"
OUTPUT_PATH = "../src-tauri/src/automation/types.rs"


@click.command()
def asyncapi_codegen():
    """Regenerate the Rust message types from the AsyncAPI document."""
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    config = CodeGeneratorConfig(source_name=DOCUMENT_PATH)
    try:
        PipelineGenerator.from_file(DOCUMENT_PATH, config).write(OUTPUT_PATH)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e
    except OSError as e:
        raise click.ClickException(f"Cannot write {OUTPUT_PATH}: {e}") from e
