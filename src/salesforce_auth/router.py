"""
FastAPI auth router: login, callback, /me, logout, pre-auth.

Builds an APIRouter around an OAuth2Client for Salesforce. The CSRF state,
the token and the resolved user are kept in the Starlette session.
"""

import logging
import os
from typing import Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, RedirectResponse

from salesforce_auth.client import OAuth2Client, generate_state
from salesforce_auth.config import ClientSettings, ProviderConfig
from salesforce_auth.errors import IdentityProviderError, MalformedResponseError
from salesforce_auth.salesforce import SalesforceProvider

logger = logging.getLogger(__name__)


def create_oauth_client() -> OAuth2Client:
    """OAuth2Client for Salesforce configured from SALESFORCE_* environment variables."""
    provider = SalesforceProvider(ProviderConfig.from_env())
    return OAuth2Client(provider, ClientSettings.from_env())


def create_auth_router(client: Optional[OAuth2Client] = None):
    """Create an APIRouter with /login, /auth/callback, /me, /logout and /preauth endpoints."""
    client = client or create_oauth_client()
    router = APIRouter()

    @router.get("/login")
    async def login(request: Request):
        """Redirect the user to the Salesforce login page."""
        state = generate_state()
        request.session["oauth_state"] = state
        return RedirectResponse(url=client.get_authorization_url(state))

    @router.get("/auth/callback", name="auth_callback")
    async def auth_callback(request: Request, code: Optional[str] = None, state: Optional[str] = None):
        """Handle OAuth callback: check state, exchange code for token, store user, redirect to /me."""
        expected_state = request.session.pop("oauth_state", None)
        if not state or state != expected_state:
            return JSONResponse({"error": "Invalid OAuth state"}, status_code=400)
        if not code:
            error = request.query_params.get("error_description") or request.query_params.get("error")
            return JSONResponse({"error": error or "Missing authorization code"}, status_code=400)

        try:
            token = await client.exchange_code(code)
            owner = await client.get_resource_owner(token)
        except (IdentityProviderError, MalformedResponseError) as e:
            logger.warning("Salesforce login failed: %s", e)
            return JSONResponse({"error": str(e)}, status_code=400)

        # Persist user identity in session
        request.session["user"] = {
            "user_id": owner.id,
            "organization_id": owner.organization_id,
            "username": owner.username,
            "display_name": owner.display_name,
            "email": owner.email,
        }
        request.session["instance_url"] = token.instance_url
        # In DEBUG, expose the raw token response for troubleshooting
        if os.getenv("DEBUG"):
            request.session["token"] = token.to_dict()
        return RedirectResponse(url="/me")

    @router.get("/me")
    async def me(request: Request):
        """Return the current user; redirect to /login if not authenticated."""
        if "user" not in request.session:
            return RedirectResponse(url="/login")
        return {
            "user": request.session["user"],
            "instance_url": request.session.get("instance_url"),
        }

    @router.get("/logout")
    async def logout(request: Request, redirect_uri: Optional[str] = None):
        """Clear session and redirect to the Salesforce logout page."""
        request.session.clear()
        return RedirectResponse(url=client.provider.logout_url({"redirect_uri": redirect_uri}))

    @router.get("/preauth")
    async def preauth(
        redirect_uri: Optional[str] = None,
        cookie_redirect_uri: Optional[str] = None,
        locale: Optional[str] = None,
    ):
        """Redirect to the Salesforce IdentityCookie page before login."""
        params = {
            "redirect_uri": redirect_uri,
            "cookie_redirect_uri": cookie_redirect_uri,
            "locale": locale,
        }
        return RedirectResponse(url=client.provider.pre_auth_url(params))

    return router
