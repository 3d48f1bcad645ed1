"""
FastAPI app: Salesforce OAuth login + session.

Decisions:
- .env is loaded before importing salesforce_auth so SALESFORCE_* and
  SESSION_SECRET are available when the auth router is created (Ruff E402
  suppressed for that).
- SALESFORCE_DOMAIN selects the login host (login.salesforce.com,
  test.salesforce.com or a My Domain / community URL).
- Session secret from SESSION_SECRET env; default "change-me" is for dev only.
"""

import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from starlette.middleware.sessions import SessionMiddleware

load_dotenv()

# Load .env before salesforce_auth so SALESFORCE_* and SESSION_SECRET are set; Ruff E402.
from salesforce_auth.router import create_auth_router  # noqa: E402

SESSION_SECRET = os.getenv("SESSION_SECRET", "change-me")

logging.basicConfig(level=logging.DEBUG if os.getenv("DEBUG") else logging.INFO)

app = FastAPI()
app.add_middleware(SessionMiddleware, secret_key=SESSION_SECRET)
app.include_router(create_auth_router())


@app.get("/")
async def home(request: Request):
    user = request.session.get("user")
    return {"logged_in": bool(user), "user": user}
