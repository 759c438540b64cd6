"""Logic for running the three extraction passes over one source file."""

import logging
from pathlib import Path

from catalog_schema.errors import UnparseableDocumentation
from catalog_schema.extract_doc_records import extract_doc_records
from catalog_schema.find_inherits import find_inherits
from catalog_schema.find_type_constant import find_type_constant
from catalog_schema.parse_source import parse_source
from catalog_schema.settings import Settings
from catalog_schema.source_model import SourceModel

logger = logging.getLogger(__name__)


def build_source_model(name: str, filename: Path, text: str, settings: Settings) -> SourceModel:
    """Reconcile the syntax tree, text scan and doc comments of one class."""
    tree = parse_source(text, str(filename))
    helper = settings.define_properties

    type_id = find_type_constant(tree, "type", helper)
    if type_id is None:
        # Intermediate classes such as ImageryLayerCatalogItem have no type.
        logger.info("(%s has no type ID)", name)

    inherits = find_inherits(
        text,
        str(filename),
        class_name=name,
        root_class=settings.root_class,
        define_properties=helper,
        inherit=settings.inherit,
    )
    return SourceModel(
        name=name,
        filename=filename,
        parsed_source=tree,
        parent=inherits.parent,
        inherits_line=inherits.line,
        type_id=type_id,
        type_name=find_type_constant(tree, "typeName", helper),
        records=extract_doc_records(text, tree, define_properties=helper),
    )


def load_source_model(name: str, filename: Path, settings: Settings) -> SourceModel:
    """Read a source file and build its model."""
    try:
        text = filename.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        msg = f"Cannot decode {filename}: {e}"
        raise UnparseableDocumentation(msg) from e
    return build_source_model(name, filename, text, settings)
