from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import (  # type: ignore
    logger,
    ALLOWED_ORIGINS,
    ALLOWED_ORIGINS_REGEX,
    EMBED_FRAME_ANCESTORS,
    DEBUG,
)

# Routers
from routers import waitlist  # type: ignore

app = FastAPI(title="Waitlist")

# ---- CORS setup ----
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_origin_regex=ALLOWED_ORIGINS_REGEX,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)


# --- Security headers ---
@app.middleware("http")
async def add_security_headers(request, call_next):
    response = await call_next(request)
    response.headers.setdefault("Strict-Transport-Security", "max-age=63072000; includeSubDomains; preload")
    response.headers.setdefault("X-Content-Type-Options", "nosniff")
    response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
    response.headers.setdefault("Permissions-Policy", "geolocation=(), microphone=(), camera=()")

    # If embedding is allowed, rely on CSP and skip X-Frame-Options
    if EMBED_FRAME_ANCESTORS == "'none'":
        response.headers.setdefault("X-Frame-Options", "DENY")

    script_src = "'self' 'unsafe-inline' 'unsafe-eval' https:" if DEBUG else "'self'"
    csp = (
        "default-src 'self'; "
        f"script-src {script_src}; "
        "connect-src 'self' https:; "
        "object-src 'none'; "
        "base-uri 'self'; "
        "form-action 'self'; "
        f"frame-ancestors {EMBED_FRAME_ANCESTORS}"
    )
    response.headers["Content-Security-Policy"] = csp
    return response


# ---- Include routers ----
app.include_router(waitlist.router)


@app.on_event("startup")
async def _init_schema():
    try:
        from core.database import init_db
        init_db()
    except Exception as _ex:
        logger.warning(f"init_db failed: {_ex}")


@app.get("/")
async def root():
    return {"ok": True}
