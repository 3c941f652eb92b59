# src/export/routes.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from database import get_storage
from export.services import ExportService
from storage.base import Storage

router = APIRouter(prefix="/api/export", tags=["export"])
logger = logging.getLogger(__name__)


def csv_response(content: str, filename: str) -> Response:
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get("/contacts")
async def export_contacts(storage: Storage = Depends(get_storage)) -> Response:
    """Download all contact messages as CSV."""
    contacts = await storage.get_all_contacts()
    logger.info(f"Exporting {len(contacts)} contacts")
    return csv_response(ExportService.contacts_csv(contacts), "contacts.csv")


@router.get("/enquiries")
async def export_enquiries(storage: Storage = Depends(get_storage)) -> Response:
    """Download the active enquiry forms as CSV."""
    forms = await storage.get_all_enquiry_forms()
    logger.info(f"Exporting {len(forms)} enquiry forms")
    return csv_response(ExportService.enquiry_forms_csv(forms), "enquiry-forms.csv")
