import asyncio
import logging
import sys
from contextlib import asynccontextmanager
from email.utils import formataddr
from functools import lru_cache

from fastapi import Depends, FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse

from email_templates import render_admission_inquiry, render_contact_inquiry
from mailer import MailDispatcher, MailDispatchError
from schemas import (
    AdmissionInquiry,
    ContactInquiry,
    DispatchErrorResponse,
    MessageResponse,
    ValidationErrorResponse,
)
from settings import Settings, get_settings

settings = get_settings()

logging.basicConfig(
    stream=sys.stdout,
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)
logger = logging.getLogger(__name__)


@lru_cache()
def get_dispatcher() -> MailDispatcher:
    """Single dispatcher shared by every request."""
    s = get_settings()
    return MailDispatcher(s.email_user, s.email_pass, host=s.smtp_host, port=s.smtp_port)


@asynccontextmanager
async def lifespan(app: FastAPI):
    missing = get_settings().missing_required()
    if missing:
        logger.error("Missing environment variables: %s", ", ".join(missing))

    # Runs in the background; startup does not wait on the mail server
    asyncio.get_running_loop().run_in_executor(None, get_dispatcher().verify)
    yield


app = FastAPI(title="Young Achievers Inquiry API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origin_allow_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.middleware("http")
async def enforce_origin_allow_list(request: Request, call_next):
    """Reject cross-origin callers outside the allow-list. No Origin header means server-to-server."""
    origin = request.headers.get("origin")
    if origin and origin not in get_settings().origin_allow_list:
        logger.warning("Blocked request from origin %s", origin)
        return JSONResponse(status_code=403, content={"message": "CORS blocked: Origin not allowed"})
    return await call_next(request)


@app.exception_handler(RequestValidationError)
async def invalid_body_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request body", "errors": jsonable_encoder(exc.errors())},
    )


@app.get("/", response_class=PlainTextResponse)
def read_root():
    return "✅ Backend running..."


def _relay(kind: str, subject: str, html_body: str, settings: Settings, dispatcher: MailDispatcher):
    try:
        dispatcher.send(
            from_address=formataddr((settings.from_name, settings.email_user)),
            to=settings.admin_email,
            subject=subject,
            html=html_body,
        )
    except MailDispatchError as e:
        logger.exception("%s inquiry error", kind.capitalize())
        return JSONResponse(
            status_code=500,
            content={"message": f"❌ Failed to send {kind} inquiry email", "error": str(e)},
        )

    logger.info("%s inquiry sent: %r", kind.capitalize(), subject)
    return {"message": f"✅ {kind.capitalize()} inquiry email sent successfully!"}


_ERROR_RESPONSES = {
    400: {"model": ValidationErrorResponse},
    500: {"model": DispatchErrorResponse},
}


@app.post("/api/contact-inquiry", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def contact_inquiry(
    inquiry: ContactInquiry,
    settings: Settings = Depends(get_settings),
    dispatcher: MailDispatcher = Depends(get_dispatcher),
):
    """Email a general contact form submission to the admin."""
    missing = inquiry.missing_fields()
    if missing:
        return JSONResponse(
            status_code=400,
            content={"message": "childName, phone and message required!", "missing": missing},
        )

    subject, html_body = render_contact_inquiry(inquiry)
    return _relay("contact", subject, html_body, settings, dispatcher)


@app.post("/api/admission-inquiry", response_model=MessageResponse, responses=_ERROR_RESPONSES)
def admission_inquiry(
    inquiry: AdmissionInquiry,
    settings: Settings = Depends(get_settings),
    dispatcher: MailDispatcher = Depends(get_dispatcher),
):
    """Email an admission form submission to the admin."""
    missing = inquiry.missing_fields()
    if missing:
        return JSONResponse(
            status_code=400,
            content={"message": "studentName, admissionClass, dob, phone required!", "missing": missing},
        )

    subject, html_body = render_admission_inquiry(inquiry)
    return _relay("admission", subject, html_body, settings, dispatcher)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
