from pizzahouse.documents.generator import (
    DocumentKind,
    GeneratedDocument,
    document_filename,
    generate_contract,
    generate_receipt,
    render_document,
)

__all__ = [
    "DocumentKind",
    "GeneratedDocument",
    "document_filename",
    "generate_contract",
    "generate_receipt",
    "render_document",
]
