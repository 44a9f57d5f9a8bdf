from fastapi import APIRouter, Request, Depends
from fastapi.responses import JSONResponse

from core.config import logger, PROJECT_NAME, VERIFY_MX
from core.waitlist_store import WaitlistEntry, WaitlistStore, get_waitlist_store
from utils.request_meta import get_client_ip
from utils.validation import validate_signup_data


router = APIRouter(prefix="/api/waitlist", tags=["waitlist"])  # POST /api/waitlist


@router.post("")
async def join_waitlist(request: Request, store: WaitlistStore = Depends(get_waitlist_store)):
    """
    Add a name/email pair to the waitlist.
    Expected JSON body: { "name": str, "email": str }
    Returns: 201 { name, email } as stored, 400 { error } on bad input, 500 { error } otherwise
    """
    try:
        payload = await request.json()
        if not isinstance(payload, dict):
            payload = {}
        name = payload.get("name")
        email = payload.get("email")

        ok, error = validate_signup_data(name, email, check_mx=VERIFY_MX)
        if not ok:
            return JSONResponse({"error": error}, status_code=400)

        entry = WaitlistEntry(
            name=name,
            email=email,
            ip_address=get_client_ip(request),
            project_name=PROJECT_NAME,
        )
        rec = store.create(entry)
        return JSONResponse({"name": rec.name, "email": rec.email}, status_code=201)
    except Exception as ex:
        logger.exception(f"[waitlist] Error adding user: {ex}")
        return JSONResponse({"error": "Failed to add user"}, status_code=500)
