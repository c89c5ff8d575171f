import logging

from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from onboarding.config import settings
from onboarding.database import Base, engine
from onboarding.models import otp, user  # noqa: F401  (register tables)
from onboarding.routers import users
from onboarding.services.auth_middleware import access_gate
from onboarding.utils.response import create_response, handle_exception
from seed import run_seed

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title=settings.PROJECT_NAME, dependencies=[Depends(access_gate)])

# Auto create tables
Base.metadata.create_all(bind=engine)

# CORS for SPA / API access
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request, exc: StarletteHTTPException):
    return handle_exception(exc)


# Seed default admin on startup
@app.on_event("startup")
def startup_event():
    run_seed()


app.include_router(users.router)


@app.get("/")
def home():
    try:
        return create_response(
            message="Onboarding API running",
            data={"service": "onboarding-backend"},
            status_code=status.HTTP_200_OK
        )
    except Exception as exc:
        return handle_exception(exc)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("onboarding.main:app", host="127.0.0.1", port=8000, reload=True)
