# src/enquiry/routes.py
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from database import get_storage
from enquiry.models import Contact, EnquiryForm
from enquiry.schemas import ContactCreate, EnquiryFormCreate, EnquiryFormStatusUpdate, EnquiryFormUpdate
from storage.base import Storage

router = APIRouter(prefix="/api", tags=["enquiry"])


@router.get("/contacts", response_model=List[Contact])
async def get_contacts(storage: Storage = Depends(get_storage)):
    """Retrieve contact messages, newest first."""
    return await storage.get_all_contacts()


@router.post("/contacts", response_model=Contact, status_code=status.HTTP_201_CREATED)
async def create_contact(contact_data: ContactCreate, storage: Storage = Depends(get_storage)):
    """Store a message from the public contact form."""
    return await storage.create_contact(contact_data)


@router.get("/enquiry-forms", response_model=List[EnquiryForm])
async def get_enquiry_forms(storage: Storage = Depends(get_storage)):
    """Retrieve the active enquiry forms."""
    return await storage.get_all_enquiry_forms()


@router.get("/enquiry-forms/{form_id}", response_model=EnquiryForm)
async def get_enquiry_form(form_id: str, storage: Storage = Depends(get_storage)):
    form = await storage.get_enquiry_form(form_id)
    if not form:
        raise HTTPException(status_code=404, detail="Enquiry form not found")
    return form


@router.post("/enquiry-forms", response_model=EnquiryForm, status_code=status.HTTP_201_CREATED)
async def create_enquiry_form(form_data: EnquiryFormCreate, storage: Storage = Depends(get_storage)):
    return await storage.create_enquiry_form(form_data)


@router.put("/enquiry-forms/{form_id}", response_model=EnquiryForm)
async def update_enquiry_form(form_id: str, form_data: EnquiryFormUpdate, storage: Storage = Depends(get_storage)):
    form = await storage.update_enquiry_form(form_id, form_data)
    if not form:
        raise HTTPException(status_code=404, detail="Enquiry form not found")
    return form


@router.put("/enquiry-forms/{form_id}/status", response_model=EnquiryForm)
async def update_enquiry_form_status(
    form_id: str,
    data: EnquiryFormStatusUpdate,
    storage: Storage = Depends(get_storage)
):
    """Show or hide an enquiry form."""
    form = await storage.update_enquiry_form_status(form_id, data.is_active)
    if not form:
        raise HTTPException(status_code=404, detail="Enquiry form not found")
    return form


@router.delete("/enquiry-forms/{form_id}")
async def delete_enquiry_form(form_id: str, storage: Storage = Depends(get_storage)) -> dict:
    if not await storage.delete_enquiry_form(form_id):
        raise HTTPException(status_code=404, detail="Enquiry form not found")
    return {"message": "Enquiry form deleted successfully"}
