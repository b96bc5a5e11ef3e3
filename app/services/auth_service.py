# app/services/auth_service.py
"""Registration and login against the credential collection."""

from typing import Optional

from fastapi.concurrency import run_in_threadpool

from app.core.exceptions import ClaimsIntakeException, RegistrationError, UserNotFoundError
from app.core.logging import get_logger
from app.core.security import create_token, hash_password, verify_password
from app.models.user import Credential, LoginRequest, RegisterRequest
from app.storage.base import DocumentCollection

logger = get_logger(__name__)


class AuthService:
    def __init__(self, collection: DocumentCollection):
        self.collection = collection

    async def register(self, request: RegisterRequest) -> Credential:
        """Hash and store a new credential. Any failure becomes RegistrationError."""
        try:
            hashed = await run_in_threadpool(hash_password, request.password)
            credential = Credential(
                user_name=request.user_name,
                password=hashed,
                email=request.email
            )
            await self.collection.insert_one(credential.to_document())
        except ClaimsIntakeException as e:
            logger.error(f"Registration failed: {e.message}", user_name=request.user_name)
            raise RegistrationError(e.message) from e
        except Exception as e:
            logger.exception("Registration failed", user_name=request.user_name)
            raise RegistrationError(str(e)) from e

        logger.info("User registered", id=credential.id, user_name=credential.user_name)
        return credential

    async def login(self, request: LoginRequest) -> Optional[str]:
        """Return a signed token, or None when the password does not match.

        Raises UserNotFoundError when no credential has the user name.
        """
        document = await self.collection.find_one({"userName": request.user_name})
        if document is None:
            logger.info("Login for unknown user", user_name=request.user_name)
            raise UserNotFoundError(request.user_name)

        credential = Credential.model_validate(document)
        same = await run_in_threadpool(verify_password, request.password, credential.password)
        if not same:
            logger.info("Login password mismatch", user_name=request.user_name)
            return None

        logger.info("Login succeeded", id=credential.id)
        return create_token(credential.id)
