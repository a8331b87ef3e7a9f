"""
LexDesk - Sample Case Documents

Seed data for development and demos.
"""

from datetime import datetime, timezone

from lexdesk.core.types import Document, DocumentCategory


def sample_documents() -> list[Document]:
    """Sample documents, newest first."""
    return [
        Document(
            id="doc-1",
            name="Supply_Agreement_v2.pdf",
            case_id="case-1",
            category=DocumentCategory.CONTRACT,
            content=(
                "This Supply Agreement is made on this 1st day of January 2022, between "
                "Kampala Industries Ltd. (\"Buyer\") and Global Supplies Inc. (\"Seller\"). "
                "The Seller agrees to supply 500 tons of raw material per month..."
            ),
            upload_date=datetime(2023, 1, 15, tzinfo=timezone.utc),
        ),
        Document(
            id="doc-2",
            name="Plaint_CIV-001-2023.pdf",
            case_id="case-1",
            category=DocumentCategory.PLEADING,
            content=(
                "IN THE HIGH COURT OF UGANDA AT KAMPALA (COMMERCIAL DIVISION)\n\n"
                "CIVIL SUIT NO. 001 OF 2023\n\n"
                "KAMPALA INDUSTRIES LTD......PLAINTIFF\n\n"
                "VERSUS\n\n"
                "GLOBAL SUPPLIES INC......DEFENDANT\n\n"
                "PLAINT..."
            ),
            upload_date=datetime(2023, 2, 1, tzinfo=timezone.utc),
        ),
        Document(
            id="doc-3",
            name="Land_Sale_Agreement.pdf",
            case_id="case-2",
            category=DocumentCategory.CONTRACT,
            content=(
                "LAND SALE AGREEMENT\n\n"
                "This agreement is made between John Doe (Vendor) and Jinja Agri-Ventures "
                "(Purchaser) for the sale of land comprised in Block 110, Plot 25, "
                "Jinja District..."
            ),
            upload_date=datetime(2023, 3, 10, tzinfo=timezone.utc),
        ),
    ]
