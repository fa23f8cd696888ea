from typing import Optional

from fastapi import APIRouter, File, HTTPException, Request, UploadFile

from app.schemas.base import ParseResponse
from app.services.parse_service import DocumentExtractionError, UnsupportedDocumentType, extract_text
from app.utils.analytics import track


router = APIRouter()


# plain def: pypdf / python-docx are blocking, FastAPI runs this in its threadpool
@router.post("", response_model=ParseResponse, summary="Extract plain text from PDF, DOCX or TXT")
def parse(request: Request, file: Optional[UploadFile] = File(None)):
    if file is None:
        raise HTTPException(status_code=400, detail="No file uploaded")
    content = file.file.read()
    try:
        text = extract_text(content, file.content_type)
    except UnsupportedDocumentType:
        raise HTTPException(status_code=400, detail="Unsupported file type")
    except DocumentExtractionError:
        raise HTTPException(status_code=500, detail="Failed to parse file")
    track(request, "document_parsed", {"content_type": file.content_type, "chars": len(text)})
    return ParseResponse(text=text)
