# backend/lawdesk/main.py

import time

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from lawdesk.core.config import settings
from lawdesk.core.logger import logger
from lawdesk.db import models  # noqa: F401  (registers tables on Base.metadata)
from lawdesk.db.database import Base, SessionLocal, engine
from lawdesk.routes.auth_routes import router as auth_router
from lawdesk.routes.client_routes import router as client_router
from lawdesk.routes.contract_routes import router as contract_router
from lawdesk.routes.dashboard_routes import router as dashboard_router
from lawdesk.routes.document_routes import router as document_router
from lawdesk.routes.library_routes import clauses_router, templates_router
from lawdesk.routes.project_routes import router as project_router
from lawdesk.routes.transaction_routes import router as transaction_router
from lawdesk.routes.user_routes import router as user_router
from lawdesk.services.session_service import ensure_bootstrap_admin, prune_expired_sessions

app = FastAPI(
    title=settings.APP_NAME,
    description="Gestão de escritório jurídico: clientes, contratos, projetos, financeiro e documentos",
    version="1.0.0",
    debug=settings.DEBUG,
)

# CORS (the Streamlit console calls the API server-side, browsers only for direct use)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(
        "%s %s -> %s (%.1f ms)",
        request.method,
        request.url.path,
        response.status_code,
        elapsed_ms,
    )
    return response


# router registration
app.include_router(auth_router)
app.include_router(dashboard_router)
app.include_router(client_router)
app.include_router(contract_router)
app.include_router(templates_router)
app.include_router(clauses_router)
app.include_router(project_router)
app.include_router(transaction_router)
app.include_router(document_router)
app.include_router(user_router)


@app.get("/health", tags=["Health"])
def health():
    return {"status": "ok"}


@app.on_event("startup")
def on_startup():
    logger.info("📌 initializing database...")
    Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        pruned = prune_expired_sessions(db)
        if pruned:
            logger.info("pruned %d expired sessions", pruned)
        ensure_bootstrap_admin(db, settings.BOOTSTRAP_ADMIN_EMAIL, settings.BOOTSTRAP_ADMIN_PASSWORD)
    finally:
        db.close()

    logger.info("📌 database ready")
