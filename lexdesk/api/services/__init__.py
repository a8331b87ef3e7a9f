from lexdesk.api.services.qa_pipeline import (
    DocumentAnswer,
    DocumentQAPipeline,
    GENERATION_FAILED_ANSWER,
    NO_RELEVANT_DOCUMENTS_ANSWER,
    get_qa_pipeline,
    reset_qa_pipeline,
)

__all__ = [
    "DocumentAnswer",
    "DocumentQAPipeline",
    "GENERATION_FAILED_ANSWER",
    "NO_RELEVANT_DOCUMENTS_ANSWER",
    "get_qa_pipeline",
    "reset_qa_pipeline",
]
