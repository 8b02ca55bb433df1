"""Plain-text invoice and contract templates.

Output depends only on the project and client passed in. Money and dates
use fixed en-US formatting so the same inputs always render the same text.
"""
from datetime import datetime
from typing import Optional

from src.documents.models import DocumentType

NOT_AVAILABLE = "N/A"

CONTRACT_TERMS = (
    "1. The freelancer agrees to complete the project as described above.",
    "2. Payment will be made upon completion of the project.",
    "3. Any revisions beyond the scope of the project will be billed separately.",
    "4. The client retains all rights to the final deliverables upon full payment.",
)


def format_currency(amount: Optional[float]) -> str:
    """$1,234.50; missing amounts render as $0.00."""
    return f"${amount or 0:,.2f}"


def format_date(value: Optional[datetime]) -> str:
    """M/D/YYYY, the en-US short date."""
    if value is None:
        return NOT_AVAILABLE
    return f"{value.month}/{value.day}/{value.year}"


def _status(project) -> str:
    return getattr(project.status, "value", project.status)


def _language_pair(project) -> str:
    if project.source_lang and project.target_lang:
        return f"{project.source_lang} -> {project.target_lang}"
    return project.source_lang or project.target_lang or NOT_AVAILABLE


def render_invoice(project, client) -> str:
    lines = [
        "INVOICE",
        "",
        "From: Freelancer",
        f"To: {client.name}",
        f"Company: {client.company or NOT_AVAILABLE}",
        f"Email: {client.email}",
        "",
        f"Project: {project.name}",
        f"Description: {project.description or NOT_AVAILABLE}",
        f"Languages: {_language_pair(project)}",
        f"Volume: {project.volume:,}" if project.volume is not None else f"Volume: {NOT_AVAILABLE}",
        f"Amount: {format_currency(project.amount)}",
        f"Deadline: {format_date(project.deadline)}",
        f"Status: {_status(project)}",
        "",
        "Payment Terms: Due upon receipt",
    ]
    return "\n".join(lines) + "\n"


def render_contract(project, client) -> str:
    lines = [
        "CONTRACT",
        "",
        "Between: Freelancer",
        f"And: {client.name} ({client.company or 'Individual'})",
        "",
        "Project Details:",
        f"Name: {project.name}",
        f"Description: {project.description or NOT_AVAILABLE}",
        f"Languages: {_language_pair(project)}",
        f"Deadline: {format_date(project.deadline)}",
        f"Amount: {format_currency(project.amount)}",
        "",
        "Terms and Conditions:",
        *CONTRACT_TERMS,
        "",
        "Client Signature: ____________________",
        "Date: ____________",
    ]
    return "\n".join(lines) + "\n"


def render_document(document_type: DocumentType, project, client) -> str:
    if document_type == DocumentType.INVOICE:
        return render_invoice(project, client)
    return render_contract(project, client)
